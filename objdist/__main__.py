import sys

from objdist.cli import main

sys.exit(main())
