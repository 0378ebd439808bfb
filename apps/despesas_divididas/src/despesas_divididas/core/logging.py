"""Process-wide logging setup."""

import logging

from despesas_divididas.core.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger once."""

    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
