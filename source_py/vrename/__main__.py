"""
Allow running vrename with ``python -m vrename``.
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
