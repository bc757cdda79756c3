from __future__ import annotations
import argparse, json, sys
from . import config as CFG
from .engine import Engine
from .normalize import split_sentence


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Anagram CLI (Engine-backed)")
    p.add_argument("--dictionary", default=None, help="Word list, one word per line (default: bundled list)")
    p.add_argument("--cache", default=None, help="Pickle path for the index")
    p.add_argument("--load", action="store_true", help="Load the index from --cache instead of building")
    p.add_argument("-k", type=int, default=CFG.MAX_RESULTS, help="Max sentences per query (0 = all)")
    p.add_argument("--q", default=None, help="Sentence to find anagrams for")
    p.add_argument("--word", default=None, help="Single word to find anagrams for")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.k < 0:
        p.error("-k must be >= 0")

    eng = Engine()
    try:
        if args.load:
            if not args.cache:
                p.error("--load requires --cache")
            eng.load(cache=args.cache, verbose=args.verbose)
        else:
            eng.build(args.dictionary, cache=args.cache, verbose=args.verbose)

        limit = args.k or None

        def emit(rows):
            if args.json:
                print(json.dumps(rows, ensure_ascii=False, indent=2))
            elif not rows:
                print("(no anagrams)")
            else:
                for i, r in enumerate(rows, 1):
                    text = " ".join(r) if isinstance(r, list) else r
                    print(f"{i:<3} {text}")

        def run_query(q: str):
            emit(eng.sentence_anagrams(split_sentence(q), limit=limit))

        if args.word:
            emit(eng.word_anagrams(args.word))

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a sentence (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
