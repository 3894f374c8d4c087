import base64
import json
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from starlette.testclient import TestClient

from auth import signed_token
from auth.token_codec import TokenCodec
from eventapi.app import create_app


SIGNATURE_KEY = "test-signature-key"
ENCRYPTION_KEY = "0123456789abcdef0123456789abcdef"
FIXED_IV = bytes.fromhex("0945a4089579908e4e587265ccf4a52d")


def _build_client(*, cors_origins: set[str] | None = None) -> TestClient:
    codec = TokenCodec(SIGNATURE_KEY, ENCRYPTION_KEY)
    app = create_app(codec, cors_origins=cors_origins or set())
    return TestClient(app)


def _encrypt_block(block: bytes, iv: bytes = FIXED_IV) -> dict:
    padder = padding.PKCS7(128).padder()
    padded = padder.update(block) + padder.finalize()
    encryptor = Cipher(
        algorithms.AES(ENCRYPTION_KEY.encode()), modes.CBC(iv)
    ).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return {
        "token": base64.b64encode(ciphertext).decode(),
        "context": iv.hex(),
    }


def _bad_signature_token(payload: dict) -> dict:
    """Well-formed block for ``payload`` carrying a signature that does not match."""
    encoded = base64.b64encode(json.dumps(payload, separators=(",", ":")).encode()).decode()
    signature = base64.b64encode(b"\x00" * 32).decode()
    return _encrypt_block(f"{encoded}.{signature}".encode())


def _foreign_token(payload: dict) -> dict:
    """Block signed with a different signature key but our encryption key."""
    encoded = signed_token.serialize(payload)
    return _encrypt_block(signed_token.sign(encoded, b"someone-elses-key").encode())


def generate_random_string(length: int) -> str:
    """Random printable ASCII string (``!`` through ``~``)."""
    return "".join(chr(33 + byte % 94) for byte in secrets.token_bytes(length))
