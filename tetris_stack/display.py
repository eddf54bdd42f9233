"""
Renderização em texto da fila e do menu.

As funções só montam strings; quem imprime é o loop interativo.
"""

from __future__ import annotations

from typing import List

from .models.piece_queue import PieceQueue

SEPARATOR = "-" * 38
BANNER = "=" * 38

MENU_PROMPT = "Selecione uma opcao: "


def render_queue(queue: PieceQueue) -> str:
    lines: List[str] = ["", "--- Estado Atual da Fila de Pecas ---"]
    snapshot = queue.snapshot()
    if not snapshot:
        lines.append("A fila esta vazia.")
        return "\n".join(lines)

    parts = []
    for slot in snapshot:
        text = str(slot.piece)
        if slot.is_head:
            text += "(Frente)"
        if slot.is_tail:
            text += "(Traseira)"
        parts.append(text + " ")
    lines.append("Fila de Pecas: " + "".join(parts))
    lines.append(f"Total de Pecas: {queue.count} / {queue.capacity}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def render_menu() -> str:
    return "\n".join([
        "",
        BANNER,
        "        Tetris Stack - Fila         ",
        BANNER,
        "Opcoes de acao:",
        "Codigo | Acao",
        SEPARATOR,
        "  1    | Jogar peca (dequeue)",
        "  2    | Inserir nova peca (enqueue)",
        "  0    | Sair",
        SEPARATOR,
    ])
