import sys

from bronkerbosch.cli import main

sys.exit(main())
