import json
from base64 import urlsafe_b64decode

import pytest

from message_signer import Message, Signer


def b64url_decode(segment: str) -> bytes:
    return urlsafe_b64decode(segment + '=' * (-len(segment) % 4))


def decode_compact(compact: str):
    """Split a JWS compact string into (header dict, payload bytes, signature bytes)."""
    header, payload, signature = compact.split('.')
    return json.loads(b64url_decode(header)), b64url_decode(payload), b64url_decode(signature)


def verify_compact(verify_key, compact: str) -> None:
    """Raises nacl BadSignatureError if the signature does not cover header.payload."""
    signing_input, _, signature = compact.rpartition('.')
    verify_key.verify(signing_input.encode('ascii'), b64url_decode(signature))


def inner_claims(token_envelope: str) -> dict:
    _, payload, _ = decode_compact(token_envelope)
    _, claims, _ = decode_compact(payload.decode('ascii'))
    return json.loads(claims)


class FixedRandom:
    """Deterministic random source that records how often it was asked."""

    def __init__(self, fill: bytes = b'\x00'):
        self.fill = fill
        self.calls = 0

    def random_bytes(self, n: int) -> bytes:
        self.calls += 1
        return self.fill * n


@pytest.fixture(scope='session')
def signer():
    return Signer('svc-a')


@pytest.fixture
def transfer():
    return Message(
        operation='transfer',
        audience='svc-b',
        ttl_seconds=60,
        body=b'42',
        content_type='text/plain',
    )
