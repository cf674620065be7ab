"""Module entrypoint for ``python -m ecgen``."""

from ecgen.cli import main

if __name__ == "__main__":
    main()
