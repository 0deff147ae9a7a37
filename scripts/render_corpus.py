from __future__ import annotations

import argparse
import hashlib

from caretdiag import PlainStyler
from caretdiag.testing import build_diagnostic, generate_cases


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="render_corpus", description="Render the seeded diagnostic corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--hash", action="store_true", help="Print only the sha256 of all renderings")
    args = ap.parse_args(argv)

    h = hashlib.sha256()
    for i, case in enumerate(generate_cases(seed=args.seed, count=args.count)):
        diag = build_diagnostic(case)
        out1 = diag.render(PlainStyler())
        out2 = diag.render(PlainStyler())
        if out2 != out1:
            raise SystemExit(f"non-idempotent rendering at case {i}")
        if args.hash:
            h.update(out1.encode("utf-8"))
            h.update(b"\n---\n")
        else:
            print(f"--- case {i}")
            print(out1, end="")

    if args.hash:
        print(h.hexdigest())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
