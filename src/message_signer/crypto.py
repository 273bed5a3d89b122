import logging
from typing import Any, Dict

import jwt
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from jwt.api_jws import PyJWS
from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from .constants import JWS_ALGORITHM
from .errors import KeyGenerationError

logger = logging.getLogger(__name__)

_jws = PyJWS()


class SigningKeyMaterial:
    """
    One Ed25519 key pair, held in memory for the life of a signer.
    Only the public half ever leaves this object; signing happens here.
    """

    def __init__(self, signing_key: SigningKey):
        self._verify_key = signing_key.verify_key
        # PyJWT signs with a cryptography key built from the same 32-byte seed
        self._private_key = Ed25519PrivateKey.from_private_bytes(signing_key.encode())

    @classmethod
    def generate(cls) -> 'SigningKeyMaterial':
        """
        Generate a fresh Ed25519 keypair.
        Raises KeyGenerationError if the provider cannot produce one.
        """
        try:
            keys = cls(SigningKey.generate())
        except (CryptoError, RuntimeError, ValueError) as exc:
            logger.error('Ed25519 key generation failed: %s', exc)
            raise KeyGenerationError('Cannot create Ed25519 keypair') from exc
        logger.info('Generated Ed25519 signing keypair')
        return keys

    def public_key(self) -> VerifyKey:
        return self._verify_key

    def public_key_bytes(self) -> bytes:
        # Raw 32-byte public key
        return bytes(self._verify_key)

    def sign_jwt(self, claims: Dict[str, Any], headers: Dict[str, Any]) -> str:
        """Compact signed JWT over the claim set."""
        return jwt.encode(claims, self._private_key, algorithm=JWS_ALGORITHM, headers=headers)

    def sign_jws(self, payload: bytes, headers: Dict[str, Any]) -> str:
        """Compact JWS over opaque payload bytes."""
        return _jws.encode(payload, self._private_key, algorithm=JWS_ALGORITHM, headers=headers)
