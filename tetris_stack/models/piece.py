from dataclasses import dataclass

from tetris_stack.pieces import is_valid_kind


@dataclass(frozen=True)
class Piece:
    kind: str
    id: int

    def __post_init__(self):
        if not is_valid_kind(self.kind):
            raise ValueError(f"tipo de peça desconhecido: {self.kind!r}")
        if self.id < 0:
            raise ValueError(f"id de peça negativo: {self.id}")

    def __str__(self) -> str:
        return f"[{self.kind} {self.id}]"
