import logging
import time
from typing import Any, Callable, Dict, Optional

from nacl.signing import VerifyKey

from .config import SignerSettings, configure_logging
from .constants import (
    AUDIENCE_CLAIM,
    BODY_CLAIM,
    EXPIRATION_CLAIM,
    INITIAL_TOKEN_CLAIM,
    ISSUED_AT_CLAIM,
    ISSUER_CLAIM,
    JOSE_TYPE,
    JWT_CONTENT_TYPE,
    JWT_ID_CLAIM,
    JWT_TYPE,
    OPERATION_CLAIM,
    PARENT_JWT_CLAIM,
)
from .crypto import SigningKeyMaterial
from .did import did_from_public_key, public_jwk
from .entropy import LockedRandomSource, RandomSource, SystemRandomSource, new_jti
from .errors import SigningError
from .types import Message, SignedMessage

logger = logging.getLogger(__name__)


class Signer:
    """
    Signs outbound messages for transport.

    Each message becomes a JWT (the claims) wrapped in a second JWS that
    carries the issuer as key id, plus an optional JWS over the raw body.
    Token and body share one random jti so a receiver can pair them.
    """

    def __init__(
        self,
        issuer: str,
        *,
        key_material: Optional[SigningKeyMaterial] = None,
        random_source: Optional[RandomSource] = None,
        clock: Callable[[], float] = time.time,
    ):
        if not isinstance(issuer, str) or not issuer:
            raise ValueError('issuer is required')
        self.issuer = issuer
        # Generated eagerly: KeyGenerationError surfaces here
        self._keys = key_material if key_material is not None else SigningKeyMaterial.generate()
        if random_source is None:
            self._random = SystemRandomSource()
        else:
            self._random = LockedRandomSource(random_source)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: SignerSettings, **kwargs: Any) -> 'Signer':
        configure_logging(settings.log_level)
        return cls(settings.issuer, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> 'Signer':
        return cls.from_settings(SignerSettings.from_env(), **kwargs)

    def public_key(self) -> VerifyKey:
        return self._keys.public_key()

    def public_jwk(self) -> Dict[str, Any]:
        return public_jwk(self._keys.public_key_bytes(), kid=self.issuer)

    @property
    def did(self) -> str:
        return did_from_public_key(self._keys.public_key_bytes())

    def sign(self, message: Message) -> SignedMessage:
        """
        Sign message into a token envelope and, if it has a body, a body envelope.
        Raises InvalidMessageError before any signing, SigningError after.
        """
        message.validate()
        try:
            jti = new_jti(self._random)
            token_envelope = self._signed_token_envelope(message, jti)
            body = self._signed_body(message, jti) if message.has_body else None
        except SigningError:
            raise
        except Exception as exc:
            logger.error('Cannot sign %r message for %s: %s', message.operation, message.audience, exc)
            raise SigningError(f'Cannot sign message: {exc}') from exc
        logger.debug(
            'Signed message jti=%s op=%s aud=%s body=%s',
            jti, message.operation, message.audience, message.has_body,
        )
        return SignedMessage(token_envelope=token_envelope, body=body)

    def _claims(self, message: Message, jti: str) -> Dict[str, Any]:
        issued_at = int(self._clock())
        claims: Dict[str, Any] = {}
        # validate() rejects reserved names in custom_claims
        if message.custom_claims:
            claims.update(message.custom_claims)
        claims[JWT_ID_CLAIM] = jti
        claims[ISSUER_CLAIM] = self.issuer
        claims[AUDIENCE_CLAIM] = message.audience
        claims[ISSUED_AT_CLAIM] = issued_at
        claims[EXPIRATION_CLAIM] = issued_at + message.ttl_seconds
        claims[OPERATION_CLAIM] = message.operation
        if message.initial_token is not None:
            claims[INITIAL_TOKEN_CLAIM] = message.initial_token
        if message.parent_token is not None:
            claims[PARENT_JWT_CLAIM] = message.parent_token
        claims[BODY_CLAIM] = message.has_body
        return claims

    def _signed_jwt(self, claims: Dict[str, Any]) -> str:
        return self._keys.sign_jwt(claims, headers={'typ': JWT_TYPE})

    def _signed_token_envelope(self, message: Message, jti: str) -> str:
        signed_jwt = self._signed_jwt(self._claims(message, jti))
        header = {
            'typ': JOSE_TYPE,
            'kid': self.issuer,
            'cty': JWT_CONTENT_TYPE,
        }
        return self._keys.sign_jws(signed_jwt.encode('ascii'), headers=header)

    def _signed_body(self, message: Message, jti: str) -> str:
        header = {
            'typ': JOSE_TYPE,
            'cty': message.content_type,
            JWT_ID_CLAIM: jti,
        }
        return self._keys.sign_jws(bytes(message.body), headers=header)
