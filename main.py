"""Run creditgit from a source checkout: ``python main.py contributors [options]``."""

from creditgit.cli import main

if __name__ == "__main__":
    main()
