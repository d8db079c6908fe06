"""Problems over two-dimensional grids and interval lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "rotate_matrix",
    "set_zeroes",
    "spiral_order",
    "find_missing_and_repeated",
    "search_matrix",
    "word_exists",
    "merge_intervals",
]


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows: set[int] = set()
    zero_cols: set[int] = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values read clockwise from the top-left corner inwards."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        if top > bottom:
            break
        result.extend(row[right] for row in matrix[top : bottom + 1])
        right -= 1
        if left > right:
            break
        result.extend(reversed(matrix[bottom][left : right + 1]))
        bottom -= 1
        if top > bottom:
            break
        result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return result


def find_missing_and_repeated(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return [repeated, missing] for an n-by-n grid meant to hold 1..n*n once each.

    A value that cannot be found is reported as -1.
    """
    size = len(grid) ** 2
    counts = Counter(value for row in grid for value in row)
    if any(not 1 <= value <= size for value in counts):
        raise ValueError("grid values must lie between 1 and n*n")
    repeated = missing = -1
    for number in range(1, size + 1):
        if counts[number] == 2:
            repeated = number
        elif counts[number] == 0:
            missing = number
    return [repeated, missing]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether target is in a matrix whose rows, read in turn, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be spelled by a path of adjacent, unrepeated cells."""
    if not word or not board:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def trace(i: int, j: int, index: int) -> bool:
        if index == len(word):
            return True
        if (
            not (0 <= i < rows and 0 <= j < cols)
            or (i, j) in used
            or board[i][j] != word[index]
        ):
            return False
        used.add((i, j))
        found = (
            trace(i - 1, j, index + 1)
            or trace(i + 1, j, index + 1)
            or trace(i, j - 1, index + 1)
            or trace(i, j + 1, index + 1)
        )
        used.discard((i, j))
        return found

    return any(
        board[i][j] == word[0] and trace(i, j, 0)
        for i in range(rows)
        for j in range(cols)
    )


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the overlapping or touching intervals merged, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged