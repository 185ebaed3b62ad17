"""Main module for spnctl."""

import logging
import os
import sys

from spnctl.cli import run
from spnctl.config.paths import get_paths
from spnctl.config.settings import settings

LOG_LEVEL_ENV = "SPNCTL_LOG_LEVEL"


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.global_state_dir.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("spnctl starting, logging to %s", log_file)
    logging.info("SPN API address: %s", settings.api_address)


def main() -> None:
    """Entry point for the spnctl application."""
    try:
        sys.exit(run(configure_logging=setup_logging))
    except KeyboardInterrupt:
        logging.warning("Interrupted")
        print("Error: interrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
