"""
core/utils.py

Общие константы и утилиты для доски 7x7.
"""

from typing import Tuple

# Размер доски и центр креста
SIZE = 7
CENTER: Tuple[int, int] = (3, 3)

# Символы для отображения
PEG = '●'       # Шарик
HOLE = '○'      # Пустая лунка
EMPTY = '▫'     # Недоступная клетка (угол)


def in_bounds(x: int, y: int) -> bool:
    """Проверяет, находится ли клетка в пределах доски 7x7."""
    return 0 <= x < SIZE and 0 <= y < SIZE


def is_corner(x: int, y: int) -> bool:
    """Клетка входит в один из угловых блоков 2x2 (вне креста)."""
    return (x < 2 or x > 4) and (y < 2 or y > 4)


def to_index(x: int, y: int) -> int:
    """(x, y) → индекс в плоском массиве (сначала x, затем y)."""
    return x * SIZE + y

