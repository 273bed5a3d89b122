class MessageSignerError(Exception):
    """Base class for every error raised by message_signer."""


class KeyGenerationError(MessageSignerError):
    """The crypto provider could not produce a key pair. Raised at construction only."""


class InvalidMessageError(MessageSignerError):
    """The message failed validation; nothing was signed."""


class SigningError(MessageSignerError):
    """Signing failed after validation passed (random draw, serialization or key misuse)."""
