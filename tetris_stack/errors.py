"""
Erros recuperáveis do Tetris Stack.

Todos são reportados ao jogador e o loop continua; nenhum encerra o processo.
"""


class TetrisStackError(Exception):
    pass


class QueueFull(TetrisStackError, OverflowError):
    def __init__(self, capacity: int):
        super().__init__(f"fila cheia ({capacity}/{capacity})")
        self.capacity = capacity


class QueueEmpty(TetrisStackError, IndexError):
    def __init__(self, operation: str = "dequeue"):
        super().__init__(f"{operation} em fila vazia")
        self.operation = operation


class InvalidInput(TetrisStackError, ValueError):
    """Entrada do menu que não é um número."""

    def __init__(self, raw: str):
        super().__init__(f"entrada inválida: {raw!r}")
        self.raw = raw


class InvalidOption(TetrisStackError, ValueError):
    """Número lido corretamente, mas sem ação associada no menu."""

    def __init__(self, code: int):
        super().__init__(f"opção inválida: {code}")
        self.code = code
