import threading
import time

import pytest

from message_signer import LockedRandomSource, SigningError, SystemRandomSource
from message_signer.entropy import new_jti

from conftest import FixedRandom, b64url_decode


def test_system_source_returns_requested_length():
    assert len(SystemRandomSource().random_bytes(16)) == 16


def test_new_jti_encodes_128_bits():
    jti = new_jti(SystemRandomSource())
    assert len(b64url_decode(jti)) == 16


def test_new_jti_from_fixed_source():
    assert new_jti(FixedRandom(b'\xff')) == '_' * 21 + 'w'


def test_new_jti_rejects_short_draw():
    class Empty:
        def random_bytes(self, n):
            return b''

    with pytest.raises(SigningError):
        new_jti(Empty())


def test_locked_source_serializes_draws():
    active = []
    overlaps = []

    class Slow:
        def random_bytes(self, n):
            active.append(1)
            if len(active) > 1:
                overlaps.append(len(active))
            time.sleep(0.001)
            active.pop()
            return b'\x00' * n

    source = LockedRandomSource(Slow())
    threads = [threading.Thread(target=source.random_bytes, args=(16,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlaps == []
