import sys

from pymatrices.cli import main

sys.exit(main())
