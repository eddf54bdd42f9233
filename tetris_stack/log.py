import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    # stderr só, para não misturar com o menu que vai para stdout
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{level: <8}</level> | {name}:{function} - {message}")
