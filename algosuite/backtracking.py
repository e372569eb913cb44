"""Backtracking searches: combinations, permutations, placements and partitions."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import permutations, product

__all__ = [
    "letter_combinations",
    "generate_parenthesis",
    "permute",
    "solve_n_queens",
    "word_exists",
    "subsets_with_dup",
    "partition_palindromes",
]

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for ``digits``.

    Digits without letters (such as 0 and 1) yield no combinations.
    """
    if not digits:
        return []
    letters = [_KEYPAD.get(digit, "") for digit in digits]
    return ["".join(combo) for combo in product(*letters)]


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, in sorted order."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened == closed == n:
            yield prefix
            return
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, taken by position."""
    return [list(order) for order in permutations(nums)]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Each board is a list of rows drawn with ``Q`` and ``.``. For ``n <= 0`` the
    single empty board is returned.
    """
    if n <= 0:
        return [[]]

    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()
    boards: list[list[str]] = []

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * col + "Q" + "." * (n - col - 1) for col in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return boards


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if ``word`` can be traced through adjacent cells of ``board``.

    Cells are joined horizontally or vertically and each is used at most once.
    """
    if not board:
        raise ValueError("board must have at least one row")
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def search(row: int, col: int, pos: int) -> bool:
        if pos == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in visited or board[row][col] != word[pos]:
            return False
        visited.add((row, col))
        found = any(search(row + dr, col + dc, pos + 1) for dr, dc in _STEPS)
        visited.discard((row, col))
        return found

    return any(search(r, c, 0) for r in range(rows) for c in range(cols))


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sub-multiset of ``nums``, each in sorted order."""
    values = sorted(nums)

    def build(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield list(chosen)
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            yield from build(i + 1, chosen)
            chosen.pop()

    return list(build(0, []))


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes."""

    def build(start: int, pieces: list[str]) -> Iterator[list[str]]:
        if start == len(s):
            yield list(pieces)
        for stop in range(start + 1, len(s) + 1):
            piece = s[start:stop]
            if piece == piece[::-1]:
                pieces.append(piece)
                yield from build(stop, pieces)
                pieces.pop()

    return list(build(0, []))