import itertools
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tetris_stack.factory import PieceGenerator
from tetris_stack.pieces import PIECE_KINDS


class CyclingKinds:
    """Substitui o random.Random: choice devolve os tipos numa ordem fixa."""

    def __init__(self, kinds=PIECE_KINDS):
        self._kinds = itertools.cycle(kinds)

    def choice(self, seq):
        return next(self._kinds)


def fixed_generator(kinds=PIECE_KINDS) -> PieceGenerator:
    return PieceGenerator(CyclingKinds(kinds))
