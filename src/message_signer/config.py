import logging
import os
from dataclasses import dataclass
from typing import Optional

ISSUER_ENV = 'MESSAGE_SIGNER_ISSUER'
LOG_LEVEL_ENV = 'MESSAGE_SIGNER_LOG_LEVEL'


@dataclass(frozen=True)
class SignerSettings:
    issuer: str
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> 'SignerSettings':
        """
        Read settings from the environment.

        MESSAGE_SIGNER_ISSUER     issuer identity, also used as the envelope key id (required)
        MESSAGE_SIGNER_LOG_LEVEL  level for the message_signer logger (default WARNING)
        """
        issuer = os.getenv(ISSUER_ENV, '').strip()
        if not issuer:
            raise ValueError(f'{ISSUER_ENV} environment variable not set')
        log_level = os.getenv(LOG_LEVEL_ENV, 'WARNING').upper()
        return cls(issuer=issuer, log_level=log_level)


def configure_logging(level: Optional[str] = None) -> None:
    """Apply a level to the package logger. Unknown names fall back to WARNING."""
    name = (level or os.getenv(LOG_LEVEL_ENV, 'WARNING')).upper()
    numeric_level = getattr(logging, name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.getLogger('message_signer').setLevel(numeric_level)
