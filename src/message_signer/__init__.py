from .types import Message, SignedMessage
from .errors import MessageSignerError, KeyGenerationError, InvalidMessageError, SigningError
from .crypto import SigningKeyMaterial
from .entropy import RandomSource, SystemRandomSource, LockedRandomSource
from .config import SignerSettings, configure_logging
from .did import did_from_public_key, public_jwk
from .signer import Signer

__all__ = [
    'Message',
    'SignedMessage',
    'MessageSignerError',
    'KeyGenerationError',
    'InvalidMessageError',
    'SigningError',
    'SigningKeyMaterial',
    'RandomSource',
    'SystemRandomSource',
    'LockedRandomSource',
    'SignerSettings',
    'configure_logging',
    'did_from_public_key',
    'public_jwk',
    'Signer',
]
