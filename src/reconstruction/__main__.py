import sys

from src.reconstruction.cli import main

sys.exit(main())
