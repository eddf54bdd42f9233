import sys

from tetris_stack.cli import main

if __name__ == "__main__":
    sys.exit(main())
