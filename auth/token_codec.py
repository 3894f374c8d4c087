from __future__ import annotations

import base64
import os
from typing import Any

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from auth import signed_token
from auth.models import CodecResult, EncodedToken, Err, Ok, TokenErrorKind
from eventapi.constants import ENCRYPTION_KEY_BYTES

IV_BYTES = 16


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


class TokenCodec:
    """Turns JSON payloads into signed, AES-256-CBC encrypted opaque tokens.

    ``encode`` returns the base64 ciphertext together with the hex IV
    ("context") needed to decrypt it. ``decode`` reverses the process and
    reports failures as ``Err`` values instead of raising: every malformed
    input collapses into ``InvalidParams`` and a bad signature into
    ``Unauthorized``.
    """

    def __init__(self, signature_key: str | bytes, encryption_key: str | bytes) -> None:
        signature_key = _as_bytes(signature_key)
        encryption_key = _as_bytes(encryption_key)
        if not signature_key:
            raise ValueError("Signature key must not be empty.")
        if len(encryption_key) != ENCRYPTION_KEY_BYTES:
            raise ValueError(
                f"Encryption key must be exactly {ENCRYPTION_KEY_BYTES} bytes."
            )
        self._signature_key = signature_key
        self._encryption_key = encryption_key

    def __repr__(self) -> str:
        return "TokenCodec(<redacted>)"

    @classmethod
    def from_env(cls) -> "TokenCodec":
        from eventapi.env import load_secret_keys

        signature_key, encryption_key = load_secret_keys()
        return cls(signature_key, encryption_key)

    def encode(self, payload: Any) -> CodecResult:
        try:
            encoded = signed_token.serialize(payload)
        except (TypeError, ValueError, RecursionError):
            return Err(TokenErrorKind.SERIALIZATION_ERROR)

        block = signed_token.sign(encoded, self._signature_key)
        iv = os.urandom(IV_BYTES)
        ciphertext = self._encrypt(block.encode("utf-8"), iv)
        return Ok(
            EncodedToken(
                token=base64.b64encode(ciphertext).decode("ascii"),
                context=iv.hex(),
            )
        )

    def decode(self, token: str | None, context: str | None) -> CodecResult:
        if not token or not context:
            return Err(TokenErrorKind.MISSING_PARAMS)

        try:
            ciphertext = base64.b64decode(token)
            iv = bytes.fromhex(context)
            block = self._decrypt(ciphertext, iv).decode("utf-8")
        except (TypeError, ValueError):
            return Err(TokenErrorKind.INVALID_PARAMS)

        encoded, signature = signed_token.split(block)
        if not encoded:
            return Err(TokenErrorKind.INVALID_PARAMS)

        try:
            authentic = signed_token.verify(encoded, signature, self._signature_key)
        except ValueError:
            return Err(TokenErrorKind.INVALID_PARAMS)
        if not authentic:
            return Err(TokenErrorKind.UNAUTHORIZED)

        try:
            return Ok(signed_token.deserialize(encoded))
        except (ValueError, RecursionError):
            return Err(TokenErrorKind.INVALID_PARAMS)

    def _encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(self._encryption_key), modes.CBC(iv)).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def _decrypt(self, ciphertext: bytes, iv: bytes) -> bytes:
        decryptor = Cipher(algorithms.AES(self._encryption_key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
