from __future__ import annotations
import sys
from kbdwrap.app import run_app


def main() -> int:
    """Module entrypoint for `python -m kbdwrap` and the `kbdwrap` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
