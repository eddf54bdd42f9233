from __future__ import annotations

import argparse
from typing import Callable

from loguru import logger

from .config import LOG_LEVELS, Settings
from .display import MENU_PROMPT, render_menu, render_queue
from .errors import InvalidInput, InvalidOption, QueueEmpty, QueueFull
from .factory import PieceGenerator, make_generator
from .log import setup_logging
from .models.piece_queue import PieceQueue

EXIT = 0
PLAY = 1
INSERT = 2


def parse_option(raw: str) -> int:
    """Converte a linha digitada em código de menu (só checa se é número)."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInput(raw) from None


class InteractionLoop:
    def __init__(
        self,
        queue: PieceQueue,
        generator: PieceGenerator,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ):
        self.queue = queue
        self.generator = generator
        self._read = read or input
        self._write = write or print

    # ----- Início -----
    def start(self) -> None:
        self._write("--- Inicializando Fila de Pecas ---")
        self.queue.initialize(self.generator)
        self._write(f"Fila inicializada com {self.queue.capacity} pecas.")
        self.show_queue()

    def show_queue(self) -> None:
        self._write(render_queue(self.queue))

    # ----- Ações -----
    def play_piece(self) -> None:
        try:
            piece = self.queue.dequeue()
        except QueueEmpty:
            self._write("ERRO: A fila de pecas futuras esta vazia! Nao ha pecas para jogar (dequeue).")
        else:
            self._write(f"SUCESSO: Peca {piece} jogada/removida da frente da fila (dequeue).")
        self.show_queue()

    def insert_piece(self) -> None:
        # a peça é gerada mesmo com a fila cheia; o id dela fica consumido
        piece = self.generator.generate()
        try:
            self.queue.enqueue(piece)
        except QueueFull:
            self._write("ERRO: A fila de pecas futuras esta cheia! Nao foi possivel inserir.")
        else:
            self._write(f"SUCESSO: Peca {piece} inserida no final da fila (enqueue).")
        self.show_queue()

    def dispatch(self, code: int) -> bool:
        """Executa a ação do código. Retorna False quando o jogador pediu para sair."""
        self._write("\n--- Executando Acao ---")
        if code == PLAY:
            self.play_piece()
        elif code == INSERT:
            self.insert_piece()
        elif code == EXIT:
            self._write("Encerrando simulacao. Obrigado por testar o controle de pecas do Tetris Stack!")
            return False
        else:
            raise InvalidOption(code)
        return True

    # ----- Loop principal -----
    def step(self) -> bool:
        self._write(render_menu())
        try:
            raw = self._read(MENU_PROMPT)
        except (EOFError, KeyboardInterrupt):
            logger.info("entrada encerrada, saindo")
            self._write("")
            return self.dispatch(EXIT)

        try:
            return self.dispatch(parse_option(raw))
        except InvalidInput as e:
            logger.info("{}", e)
            self._write("Entrada invalida. Por favor, digite um numero.")
        except InvalidOption as e:
            logger.info("{}", e)
            self._write("Opcao invalida. Por favor, escolha 1, 2 ou 0.")
            self.show_queue()
        return True

    def run(self) -> int:
        self.start()
        while self.step():
            pass
        return 0


def _capacity(value: str) -> int:
    capacity = int(value)
    if capacity < 1:
        raise argparse.ArgumentTypeError("a capacidade precisa ser >= 1")
    return capacity


def parse_arguments(argv=None, settings: Settings | None = None):
    parser = argparse.ArgumentParser(
        description="Tetris Stack - simulação da fila de peças futuras",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    if settings is None:
        try:
            settings = Settings.from_env()
        except ValueError as e:
            parser.error(str(e))
    parser.add_argument(
        "--capacity",
        type=_capacity,
        default=settings.queue_capacity,
        help="Quantidade fixa de peças na fila",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.rng_seed,
        help="Semente do sorteio de peças (vazio = aleatória)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Nível de log do loguru (stderr)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)
    logger.debug("capacidade={} seed={}", args.capacity, args.seed)

    loop = InteractionLoop(PieceQueue(args.capacity), make_generator(args.seed))
    return loop.run()
