"""
Main module entry point.

Runs the HTTP API: python -m appliance_identifier.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "appliance_identifier.main.app:app",
        host="0.0.0.0",
        port=settings.ge.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
