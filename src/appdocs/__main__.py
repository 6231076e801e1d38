import sys

from appdocs.cli import main

sys.exit(main())
