"""CLI entry point.

Usage:
    python -m injection.cli inspect myapp.composition:configure
    injection-cli check myapp.composition:configure -r myapp.mail:Mailer
"""

from loguru import logger

import injection
from injection.cli.app import app
from injection.logging import setup_logging
from injection.settings import get_settings


def main() -> None:
    """CLI entry point with logging configuration."""
    setup_logging(get_settings().log_level, compact=True)
    logger.enable(injection.__name__)
    app()


if __name__ == "__main__":
    main()
