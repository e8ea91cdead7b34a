# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the task service, runs exactly one command
and returns its exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import setup_logging
from .bootstrap import configure_colors, create_service
from .commands import registry

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )
    configure_colors(settings)

    logger.debug("argv=%s db=%s", list(argv), settings.db_path)

    service = create_service(settings=settings)
    try:
        return registry.dispatch(service, argv)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return EXIT_INTERRUPTED
    except Exception:
        logger.exception("Unhandled error running %s", list(argv))
        raise


if __name__ == "__main__":
    raise SystemExit(main())
