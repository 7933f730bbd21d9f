"""
endorsement_service.api.__main__

Entrypoint for `python -m endorsement_service.api`.
"""

from __future__ import annotations

import uvicorn

from endorsement_service.api.app import create_app
from endorsement_service.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
