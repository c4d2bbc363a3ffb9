# main.py
import sys
from termstats.cli import main

if __name__ == "__main__":
    sys.exit(main())
