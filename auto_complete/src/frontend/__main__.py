from __future__ import annotations
import argparse, json, sys
from backend.config import TOP_K
from backend.errors import DictionaryUnavailableError
from . import initialize, complete


def _format(rows: list[str], as_json: bool) -> str:
    if as_json:
        return json.dumps(rows, ensure_ascii=False)
    return "[" + " ".join(rows) + "]"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Typo-tolerant autocomplete CLI")
    p.add_argument("-q", "--query", default="", help="Query to get suggestions for")
    p.add_argument("-n", "--num-results", type=int, default=TOP_K, help="Number of results to return")
    p.add_argument("--dict", dest="dictionaries", action="append", default=None,
                   help="Word list file or folder (repeatable; default: system word list)")
    p.add_argument("--cache", default=None, help="Pickle path for the prefix index")
    p.add_argument("--rebuild", action="store_true", help="Ignore an existing --cache and rebuild it")
    p.add_argument("--json", action="store_true", help="Emit a JSON array")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if not args.query and not args.repl:
        p.error("Must provide a query parameter")
    if args.num_results < 0:
        p.error("--num-results must be >= 0")

    try:
        initialize(args.dictionaries, cache=args.cache, rebuild=args.rebuild, verbose=args.verbose)
    except DictionaryUnavailableError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.query:
        print(_format(complete(args.query, top_k=args.num_results), args.json))

    if args.repl:
        print("Type a query (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                print(); break
            if not q:
                break
            print(_format(complete(q, top_k=args.num_results), args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
