# pathgrid/__main__.py
import sys

from pathgrid.cli import main

sys.exit(main())
