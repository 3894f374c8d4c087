from __future__ import annotations

import uvicorn

from eventapi.app import bind_address, create_app
from eventapi.constants import APP_VERSION
from eventapi.env import load_env, setup_logging, validate_env

__all__ = [
    "APP_VERSION",
    "create_app",
    "load_env",
    "main",
    "setup_logging",
    "validate_env",
]


def main() -> None:
    app = create_app()
    host, port = bind_address()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
