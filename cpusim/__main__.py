import sys

from cpusim.cli import main

sys.exit(main())
