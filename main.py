# main.py

import sys

from nanoargs.cli.application import main

if __name__ == "__main__":
    sys.exit(main())
