"""Logging setup for the command line front end."""

from __future__ import annotations

import logging


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger.

    Only warnings reach the terminal by default so command output stays readable;
    ``verbose`` switches to DEBUG to show reconciliation and persistence details.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
