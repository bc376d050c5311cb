"""
stock_orchestrator.api.__main__

Entrypoint for running the FastAPI application via `python -m stock_orchestrator.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from stock_orchestrator.api.app import create_app
from stock_orchestrator.settings import get_settings


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


# --- Module Notes -----------------------------------------------------------
# Host/port and the ORQ_* upstream URLs all come from `Settings`; in prod a missing
# upstream URL stops the process here, before uvicorn binds the port.
