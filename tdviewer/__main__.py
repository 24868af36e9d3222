"""Run as a module: python -m tdviewer <command>"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
