"""
core/board.py

Представление доски 7x7 через плоский bytearray.

Клетки хранятся в порядке "сначала x, затем y": индекс = x * 7 + y.
Тот же порядок используется для 49-символьной строки доски и для
отпечатка (fingerprint) в множестве тупиковых состояний.
"""

from enum import IntEnum
from typing import List, NamedTuple, Tuple, Union

from utils.error_handling import InvalidBoardError
from .utils import SIZE, CENTER, in_bounds, is_corner, to_index


class CellState(IntEnum):
    """Состояние клетки. Значения совпадают с цифрами в строке доски."""
    INVALID = 0
    OPEN = 1
    FULL = 2


class Direction(IntEnum):
    """Направление хода. Порядок членов задаёт порядок перебора."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """Единичный сдвиг (dx, dy)."""
        return _OFFSETS[self]

    @property
    def title(self) -> str:
        """Имя для вывода: Up, Right, Down, Left."""
        return self.name.capitalize()


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Coordinate(NamedTuple):
    """Клетка (x, y): x — столбец (0 слева), y — ряд (0 сверху)."""
    x: int
    y: int

    def shifted(self, direction: Direction, steps: int = 1) -> 'Coordinate':
        """Клетка, сдвинутая на steps шагов в направлении direction."""
        dx, dy = direction.offset
        return Coordinate(self.x + dx * steps, self.y + dy * steps)

    def in_bounds(self) -> bool:
        """Клетка лежит в пределах доски 7x7."""
        return in_bounds(self.x, self.y)


class Move(NamedTuple):
    """
    Ход: шарик из initial перепрыгивает через jumped и встаёт в final.
    Только описание — ход сам себя не проверяет.
    """
    initial: Coordinate
    jumped: Coordinate
    final: Coordinate
    direction: Direction

    @classmethod
    def build(cls, initial: Coordinate, direction: Direction) -> 'Move':
        """Строит ход по начальной клетке и направлению."""
        return cls(initial, initial.shifted(direction, 1),
                   initial.shifted(direction, 2), direction)


CellKey = Union[Coordinate, Tuple[int, int]]


def _build_layout(center: CellState) -> bytes:
    cells = bytearray(SIZE * SIZE)
    for x in range(SIZE):
        for y in range(SIZE):
            if is_corner(x, y):
                state = CellState.INVALID
            elif (x, y) == CENTER:
                state = center
            else:
                state = CellState.FULL if center == CellState.OPEN else CellState.OPEN
            cells[to_index(x, y)] = state
    return bytes(cells)


# Стартовая позиция: пустой только центр
START_LAYOUT = _build_layout(CellState.OPEN)
# Победная позиция: единственный шарик в центре
WINNING_LAYOUT = _build_layout(CellState.FULL)


def _build_candidates() -> List[Tuple[int, int, int, Move]]:
    """
    Все ходы, укладывающиеся в пределы доски, в фиксированном порядке
    перебора: x (внешний цикл), y, затем Up, Right, Down, Left.
    Каждая запись: (индекс initial, индекс jumped, индекс final, Move).
    """
    candidates = []
    for x in range(SIZE):
        for y in range(SIZE):
            initial = Coordinate(x, y)
            for direction in Direction:
                move = Move.build(initial, direction)
                if not (move.jumped.in_bounds() and move.final.in_bounds()):
                    continue
                candidates.append((
                    to_index(*move.initial),
                    to_index(*move.jumped),
                    to_index(*move.final),
                    move,
                ))
    return candidates


MOVE_CANDIDATES = _build_candidates()


class Board:
    """
    Изменяемая доска 7x7.

    Принадлежит одному владельцу (решателю). Снимок — bytes, восстановление —
    присваивание среза, поэтому откат хода при переборе дешёвый.
    """
    __slots__ = ('cells',)

    def __init__(self, cells: bytes = START_LAYOUT):
        if len(cells) != SIZE * SIZE:
            raise InvalidBoardError(
                f"Доска должна содержать {SIZE * SIZE} клеток, получено {len(cells)}"
            )
        self.cells = bytearray(cells)

    @classmethod
    def standard(cls) -> 'Board':
        """Стандартная стартовая позиция."""
        return cls(START_LAYOUT)

    @classmethod
    def winning(cls) -> 'Board':
        """Победная позиция: один шарик в центре."""
        return cls(WINNING_LAYOUT)

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Создаёт Board из строки цифр 0/1/2 (как в board_to_string).
        Пробельные символы игнорируются.

        Raises:
            InvalidBoardError: неверная длина, посторонние символы
                или нарушена форма креста
        """
        digits = ''.join(text.split())
        if len(digits) != SIZE * SIZE:
            raise InvalidBoardError(
                f"Ожидалось {SIZE * SIZE} цифр, получено {len(digits)}"
            )
        if any(ch not in '012' for ch in digits):
            raise InvalidBoardError("Допустимы только цифры 0, 1, 2")

        cells = bytes(int(ch) for ch in digits)
        for index, state in enumerate(cells):
            x, y = divmod(index, SIZE)
            if is_corner(x, y) != (state == CellState.INVALID):
                raise InvalidBoardError(
                    f"Клетка ({x}, {y}) нарушает форму креста"
                )
        return cls(cells)

    def reset(self) -> None:
        """Возвращает стартовую позицию."""
        self.cells[:] = START_LAYOUT

    def __getitem__(self, key: CellKey) -> CellState:
        return CellState(self.cells[to_index(*key)])

    def __setitem__(self, key: CellKey, state: CellState) -> None:
        self.cells[to_index(*key)] = state

    def count(self, state: CellState) -> int:
        """Количество клеток в заданном состоянии."""
        return self.cells.count(state)

    def marble_count(self) -> int:
        return self.cells.count(CellState.FULL)

    def snapshot(self) -> bytes:
        """Полная копия состояния клеток."""
        return bytes(self.cells)

    def restore(self, snapshot: bytes) -> None:
        self.cells[:] = snapshot

    def fingerprint(self) -> bytes:
        """
        Канонический отпечаток: все 49 состояний клеток.
        Одинаковое содержимое доски → одинаковый отпечаток,
        независимо от того, какими ходами доска получена.
        """
        return bytes(self.cells)

    def is_winning(self) -> bool:
        return self.cells == WINNING_LAYOUT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.marble_count()} marbles)"
