from __future__ import annotations
import sys
from docbundle.app import collect_docs, render_docs, run_app


def main() -> int:
    """Module entrypoint for `python -m docbundle.main` or `python -m docbundle` (via __main__)."""
    return run_app(sys.argv)


def collect_main() -> int:
    return collect_docs(sys.argv)


def render_main() -> int:
    return render_docs(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
