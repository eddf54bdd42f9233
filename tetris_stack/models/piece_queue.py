from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional

from loguru import logger

from tetris_stack.errors import QueueEmpty, QueueFull
from tetris_stack.models.piece import Piece


class QueueSlot(NamedTuple):
    index: int
    piece: Piece
    is_head: bool
    is_tail: bool


class PieceQueue:
    """
    Fila circular de capacidade fixa com as próximas peças do jogo.

    O armazenamento é uma lista de `capacity` posições; `head` aponta para a
    próxima peça a sair e `count` diz quantas posições estão ocupadas a partir
    dela, andando de forma circular. A próxima inserção vai sempre em
    (head + count) % capacity.
    """

    def __init__(self, capacity: int = 5):
        if capacity < 1:
            raise ValueError(f"capacidade precisa ser >= 1, recebido {capacity}")
        self._capacity = capacity
        self._slots: List[Optional[Piece]] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def head(self) -> int:
        return self._head

    @property
    def count(self) -> int:
        return self._count

    # ----- Estado -----
    def is_full(self) -> bool:
        return self._count == self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def _tail_index(self) -> int:
        return (self._head + self._count - 1) % self._capacity

    # ----- Mutação -----
    def enqueue(self, piece: Piece) -> None:
        if self.is_full():
            logger.info("enqueue recusado, fila cheia: {} descartada", piece)
            raise QueueFull(self._capacity)
        index = (self._head + self._count) % self._capacity
        self._slots[index] = piece
        self._count += 1
        logger.debug("enqueue {} na posição {} ({}/{})", piece, index, self._count, self._capacity)

    def dequeue(self) -> Piece:
        if self.is_empty():
            logger.info("dequeue recusado, fila vazia")
            raise QueueEmpty("dequeue")
        piece = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        logger.debug("dequeue {} ({}/{})", piece, self._count, self._capacity)
        return piece

    def initialize(self, generator) -> None:
        """Enche a fila vazia com `capacity` peças novas do gerador."""
        if self._count != 0 or self._head != 0:
            raise RuntimeError("initialize só pode ser chamado numa fila nova")
        for _ in range(self._capacity):
            self.enqueue(generator.generate())

    # ----- Leitura -----
    def front(self) -> Piece:
        if self.is_empty():
            raise QueueEmpty("front")
        return self._slots[self._head]

    def back(self) -> Piece:
        if self.is_empty():
            raise QueueEmpty("back")
        return self._slots[self._tail_index()]

    def snapshot(self) -> List[QueueSlot]:
        if self.is_empty():
            return []
        tail = self._tail_index()
        result = []
        for offset in range(self._count):
            i = (self._head + offset) % self._capacity
            result.append(QueueSlot(i, self._slots[i], i == self._head, i == tail))
        return result

    def __iter__(self) -> Iterator[Piece]:
        for slot in self.snapshot():
            yield slot.piece

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0
