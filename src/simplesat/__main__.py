import sys

from simplesat.cli import main

sys.exit(main())
