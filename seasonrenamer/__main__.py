"""Entry point for ``python -m seasonrenamer``."""
import sys

from .renamer import main

sys.exit(main())
