from typing import Any, Dict, Optional

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from jwt.algorithms import OKPAlgorithm

from .constants import JWS_ALGORITHM

ED25519_MULTICODEC_PREFIX = b'\xed\x01'
ED25519_KEY_LENGTH = 32

_BASE58_ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'


def _base58btc(data: bytes) -> str:
    num = int.from_bytes(data, 'big')
    digits = []
    while num:
        num, rem = divmod(num, 58)
        digits.append(_BASE58_ALPHABET[rem])
    # every leading zero byte becomes a leading '1'
    pad = len(data) - len(data.lstrip(b'\x00'))
    return '1' * pad + ''.join(reversed(digits))


def _check_key(public_key: bytes) -> None:
    if len(public_key) != ED25519_KEY_LENGTH:
        raise ValueError('Ed25519 public key must be 32 bytes')


def did_from_public_key(public_key: bytes) -> str:
    """
    did:key identifier for a raw Ed25519 public key
    (multicodec 0xed01 + base58btc with 'z' multibase prefix).
    """
    _check_key(public_key)
    return 'did:key:z' + _base58btc(ED25519_MULTICODEC_PREFIX + public_key)


def public_jwk(public_key: bytes, kid: Optional[str] = None) -> Dict[str, Any]:
    """RFC 8037 OKP JWK that verifiers can use to check our envelopes."""
    _check_key(public_key)
    jwk = OKPAlgorithm.to_jwk(Ed25519PublicKey.from_public_bytes(public_key), as_dict=True)
    jwk['alg'] = JWS_ALGORITHM
    jwk['use'] = 'sig'
    if kid is not None:
        jwk['kid'] = kid
    return jwk
