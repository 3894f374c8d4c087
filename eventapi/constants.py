from __future__ import annotations

import logging

LOGGER = logging.getLogger("eventapi")
TOKEN_LOGGER = logging.getLogger("eventapi.token")
APP_VERSION = "0.1.0"

SIGNATURE_KEY_ENV = "SECRET_SIGNATURE_KEY"
ENCRYPTION_KEY_ENV = "SECRET_ENCRYPTION_KEY"
ENCRYPTION_KEY_BYTES = 32
