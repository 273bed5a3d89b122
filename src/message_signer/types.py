from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import RESERVED_CLAIMS
from .errors import InvalidMessageError


@dataclass(frozen=True)
class Message:
    """
    An outbound message waiting to be signed.
    Must pass validate() before the signer will touch it.
    """
    operation: str
    audience: str
    ttl_seconds: int
    initial_token: Optional[str] = None
    parent_token: Optional[str] = None
    custom_claims: Optional[Mapping[str, Any]] = None
    body: Optional[bytes] = None
    content_type: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def validate(self) -> None:
        """
        Raise InvalidMessageError describing the first problem found.
        Custom claims may not reuse a reserved claim name.
        """
        if not isinstance(self.operation, str) or not self.operation:
            raise InvalidMessageError('operation is required')
        if not isinstance(self.audience, str) or not self.audience:
            raise InvalidMessageError('audience is required')
        # bool is an int subclass
        if isinstance(self.ttl_seconds, bool) or not isinstance(self.ttl_seconds, int):
            raise InvalidMessageError('ttl_seconds must be an integer')
        if self.ttl_seconds <= 0:
            raise InvalidMessageError(f'ttl_seconds must be positive, got {self.ttl_seconds}')
        for name in ('initial_token', 'parent_token'):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or not value):
                raise InvalidMessageError(f'{name} must be a non-empty string when present')
        if self.body is not None:
            if not isinstance(self.body, (bytes, bytearray)):
                raise InvalidMessageError('body must be bytes')
            if not isinstance(self.content_type, str) or not self.content_type:
                raise InvalidMessageError('content_type is required when body is present')
        elif self.content_type is not None:
            raise InvalidMessageError('content_type given without a body')
        if self.custom_claims is not None:
            if not isinstance(self.custom_claims, Mapping):
                raise InvalidMessageError('custom_claims must be a mapping of claim names to values')
            for key in self.custom_claims:
                if not isinstance(key, str) or not key:
                    raise InvalidMessageError(f'custom claim names must be non-empty strings, got {key!r}')
                if key in RESERVED_CLAIMS:
                    raise InvalidMessageError(f'custom claim {key!r} collides with a reserved claim')


@dataclass(frozen=True)
class SignedMessage:
    token_envelope: str
    body: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None
