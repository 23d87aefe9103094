"""
Checkout launcher for the TemplateApp Qt UI.

Run: python main.py  (same as ``python -m templateapp``)
"""
from __future__ import annotations

import sys

from templateapp.__main__ import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
