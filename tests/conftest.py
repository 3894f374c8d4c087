import pytest

from auth.token_codec import TokenCodec
from tests.token_helpers import ENCRYPTION_KEY, SIGNATURE_KEY


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(SIGNATURE_KEY, ENCRYPTION_KEY)


@pytest.fixture
def secret_env(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_SIGNATURE_KEY", SIGNATURE_KEY)
    monkeypatch.setenv("SECRET_ENCRYPTION_KEY", ENCRYPTION_KEY)
