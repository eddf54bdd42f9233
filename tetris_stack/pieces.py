# Tipos de peça do Tetris Stack, na ordem usada pelo gerador.
I = "I"
O = "O"
T = "T"
L = "L"
J = "J"
Z = "Z"
S = "S"

PIECE_KINDS = (I, O, T, L, J, Z, S)


def is_valid_kind(kind) -> bool:
    return kind in PIECE_KINDS
