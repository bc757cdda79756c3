from __future__ import annotations
import argparse
from .exercises import pascal

PASCAL_ROWS = 10


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print Pascal's triangle")
    parser.add_argument("--rows", type=int, default=PASCAL_ROWS, help="Last row to print (0-based)")
    args = parser.parse_args(argv)
    if args.rows < 0:
        parser.error("--rows must be >= 0")

    print("Pascal's Triangle")
    for row in range(args.rows + 1):
        print(" ".join(str(pascal(col, row)) for col in range(row + 1)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
