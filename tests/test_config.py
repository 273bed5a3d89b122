import logging

import pytest

from message_signer import Signer, SignerSettings, configure_logging


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv('MESSAGE_SIGNER_ISSUER', 'svc-a')
    monkeypatch.setenv('MESSAGE_SIGNER_LOG_LEVEL', 'debug')

    assert SignerSettings.from_env() == SignerSettings(issuer='svc-a', log_level='DEBUG')


def test_settings_require_issuer(monkeypatch):
    monkeypatch.delenv('MESSAGE_SIGNER_ISSUER', raising=False)
    with pytest.raises(ValueError, match='MESSAGE_SIGNER_ISSUER'):
        SignerSettings.from_env()


def test_signer_from_env(monkeypatch):
    monkeypatch.setenv('MESSAGE_SIGNER_ISSUER', 'svc-env')
    monkeypatch.delenv('MESSAGE_SIGNER_LOG_LEVEL', raising=False)

    signer = Signer.from_env()
    assert signer.issuer == 'svc-env'
    assert signer.public_jwk()['kid'] == 'svc-env'


@pytest.mark.parametrize('name, expected', [
    ('INFO', logging.INFO),
    ('debug', logging.DEBUG),
    ('nonsense', logging.WARNING),
    ('BASIC_FORMAT', logging.WARNING),
])
def test_configure_logging(name, expected):
    logger = logging.getLogger('message_signer')
    previous = logger.level
    try:
        configure_logging(name)
        assert logger.level == expected
    finally:
        logger.setLevel(previous)
