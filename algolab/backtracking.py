"""Backtracking searches: the n-queens puzzle and subsets with a given sum."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def n_queens(n: int) -> list[int] | None:
    """Return the first placement of ``n`` non-attacking queens, or ``None``.

    The result gives, for each row in turn, the column of its queen.  Columns
    are tried in ascending order, so the placement is the lexicographically
    smallest one.
    """
    if n < 0:
        raise ValueError("board size cannot be negative")
    columns: list[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            placed != col and abs(placed - col) != abs(r - row)
            for r, placed in enumerate(columns)
        )

    def place() -> bool:
        for col in range(n):
            if not safe(col):
                continue
            columns.append(col)
            if len(columns) == n or place():
                return True
            columns.pop()
        return False

    if n and place():
        return list(columns)
    return None


def queens_board(positions: Sequence[int]) -> list[list[int]]:
    """Return the board for ``positions``: 1 where a queen stands, 0 elsewhere."""
    n = len(positions)
    if any(not 0 <= col < n for col in positions):
        raise ValueError("queen column out of range")
    return [[1 if c == col else 0 for c in range(n)] for col in positions]


def subset_sums(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield the subsets of ``values`` (kept in input order) that add up to ``target``.

    Values are assumed non-negative: a branch is abandoned as soon as its sum
    exceeds ``target``, and a subset is reported as soon as it reaches it.
    """
    items = list(values)

    def search(index: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        if index >= len(items) or total > target:
            return
        chosen.append(items[index])
        yield from search(index + 1, chosen, total + items[index])
        chosen.pop()
        yield from search(index + 1, chosen, total)

    yield from search(0, [], 0)