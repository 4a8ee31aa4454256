"""
Zoo Console - Module Entry Point
Runs the zoo with `python -m zoo_console`.
"""

import sys

from .main import main

sys.exit(main())
