"""Module entrypoint for ``python -m bestls``.

All argument parsing and pipeline setup happen in ``bestls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
