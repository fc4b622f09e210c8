import sys

from polish.cli import main

sys.exit(main())
