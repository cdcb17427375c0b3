import sys

from bellingcat_toolkit.cli import main

sys.exit(main())
