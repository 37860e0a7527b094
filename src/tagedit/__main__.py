"""Module entry point so ``python -m tagedit`` runs the CLI."""

import sys

from tagedit.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
