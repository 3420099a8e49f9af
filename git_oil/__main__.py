"""Module entrypoint for ``python -m git_oil``."""

from .cli import main


if __name__ == "__main__":
    main()
