"""Module entrypoint to run opwrap via `python -m opwrap`."""

from opwrap.cli import main


def run() -> None:
    """Dispatch to the console script handler."""

    main()


if __name__ == "__main__":  # pragma: no cover
    run()
