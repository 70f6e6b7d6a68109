import sys

from nontransitive_dice.cli import main

if __name__ == "__main__":
    sys.exit(main())
