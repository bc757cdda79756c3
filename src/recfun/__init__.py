"""
Recursion exercises: Pascal's triangle, balanced parentheses, coin change.

Main Functions:
    pascal(c, r): element at column c of row r of Pascal's triangle
    balance(chars): True if the parentheses in chars are balanced
    count_change(money, coins): ways to give change for money with coins

Run `python -m recfun` to print the first rows of Pascal's triangle.
"""

from .exercises import pascal, pascal_row, balance, count_change

__all__ = ["pascal", "pascal_row", "balance", "count_change"]
