from __future__ import annotations

import base64
import hashlib
import hmac
import json
from typing import Any


def serialize(payload: Any) -> str:
    """Compact JSON for ``payload``, base64 encoded."""
    data = json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def signature_for(encoded: str, key: bytes) -> str:
    """HMAC-SHA256 over the decoded bytes of ``encoded``, not the base64 text.

    Tokens issued by earlier deployments were signed this way, so the byte
    contract has to stay as is.
    """
    data = base64.b64decode(encoded)
    sig = hmac.new(key, data, hashlib.sha256).digest()
    return base64.b64encode(sig).decode("ascii")


def sign(encoded: str, key: bytes) -> str:
    return f"{encoded}.{signature_for(encoded, key)}"


def split(block: str) -> tuple[str, str]:
    """Split on the first ``.``; everything after it is the signature.

    Older deployments kept only the second dot-separated segment. Neither
    base64 part can contain a dot, so the two only differ for blocks that
    fail verification either way.
    """
    encoded, _, signature = block.partition(".")
    return encoded, signature


def verify(encoded: str, signature: str, key: bytes) -> bool:
    expected = signature_for(encoded, key)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


def deserialize(encoded: str) -> Any:
    return json.loads(base64.b64decode(encoded).decode("utf-8"))
