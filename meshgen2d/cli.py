"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="meshgen2d", description="2D mesh generator")
    parser.parse_args(argv)
    print("hi")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())