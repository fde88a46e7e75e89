"""Module entrypoint for running linecfg as ``python -m linecfg``."""

from __future__ import annotations

from linecfg.cli import main


if __name__ == "__main__":
    main()
