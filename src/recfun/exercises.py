from __future__ import annotations
from typing import Iterable, List, Sequence


def pascal_row(r: int) -> List[int]:
    """
    Row r of Pascal's triangle (0-based).
    Each row is built from the previous one: 1, pairwise sums, 1.
    """
    if r < 0:
        raise ValueError(f"row must be >= 0, got {r}")
    row = [1]
    for _ in range(r):
        row = [1] + [a + b for a, b in zip(row, row[1:])] + [1]
    return row


def pascal(c: int, r: int) -> int:
    """
    Element at column c of row r of Pascal's triangle, both 0-based.

    Example:
        >>> pascal(1, 3)
        3

    Raises:
        ValueError: if r < 0 or c is outside 0..r.
    """
    if r < 0 or c < 0 or c > r:
        raise ValueError(f"no element at column {c} of row {r}")
    return pascal_row(r)[c]


def balance(chars: Iterable[str]) -> bool:
    """
    True if every "(" is closed by a later ")" and no ")" comes before its "(".
    Characters other than parentheses are ignored.

    Examples:
        "(if (zero? x) max (/ 1 x))" -> True
        ":-)"                        -> False
        "())("                       -> False
    """
    depth = 0
    for ch in chars:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def count_change(money: int, coins: Sequence[int]) -> int:
    """
    Number of ways to give change for `money` using any number of each coin
    denomination. Zero money can be changed one way (no coins); negative money
    or an empty coin list cannot be changed at all.

    Raises:
        ValueError: if a denomination is zero or negative.
    """
    if any(c <= 0 for c in coins):
        raise ValueError(f"coin denominations must be positive, got {list(coins)}")
    if money < 0:
        return 0
    # ways[m]: ways to make m from the coins seen so far
    ways = [1] + [0] * money
    for coin in coins:
        for m in range(coin, money + 1):
            ways[m] += ways[m - coin]
    return ways[money]
