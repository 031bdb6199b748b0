from __future__ import annotations
import sys
from bpedit.app import run_app


def main() -> int:
    """Module entrypoint for `python -m bpedit.main`, `python -m bpedit` and the `bpedit` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
