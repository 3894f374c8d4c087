from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class TokenErrorKind(str, Enum):
    MISSING_PARAMS = "MissingParams"
    INVALID_PARAMS = "InvalidParams"
    UNAUTHORIZED = "Unauthorized"
    SERIALIZATION_ERROR = "SerializationError"


@dataclass(frozen=True)
class EncodedToken:
    token: str
    context: str

    def as_dict(self) -> dict[str, str]:
        return {"token": self.token, "context": self.context}


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: TokenErrorKind

    @property
    def ok(self) -> bool:
        return False


CodecResult = Union[Ok, Err]
