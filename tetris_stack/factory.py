# factory.py
from __future__ import annotations

import random

from loguru import logger

from .pieces import PIECE_KINDS
from .models.piece import Piece


class IdCounter:
    """Contador monotônico de ids. Nunca volta atrás nem reaproveita valores."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"id inicial negativo: {start}")
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next


class PieceGenerator:
    def __init__(self, rng: random.Random | None = None, counter: IdCounter | None = None):
        # sem RNG explícito, semeia uma vez por processo (entropia do sistema/hora)
        self._rng = rng or random.Random()
        self.counter = counter or IdCounter()

    def generate(self) -> Piece:
        """
        Gera uma peça com tipo sorteado entre os 7 possíveis e o próximo id.
        """
        kind = self._rng.choice(PIECE_KINDS)
        piece = Piece(kind, self.counter.next())
        logger.debug("peça gerada: {}", piece)
        return piece


def make_generator(seed: int | None = None) -> PieceGenerator:
    rng = random.Random(seed) if seed is not None else random.Random()
    return PieceGenerator(rng)
