#!/usr/bin/env python3
"""
Allow running esimqa as a module: python -m esimqa

This enables the following usage:
    python -m esimqa [SUITE] [OPTIONS]

Which is equivalent to:
    esimqa [SUITE] [OPTIONS]
"""

from esimqa.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
