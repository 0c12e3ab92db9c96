"""Module entrypoint for ``python -m infotree``.

All argument parsing and rendering happen in ``infotree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
