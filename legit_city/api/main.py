"""ASGI entrypoint: `uvicorn legit_city.api.main:app` or `python -m legit_city.api.main`."""

from __future__ import annotations

import uvicorn

from legit_city.api.api_config import get_api_config
from legit_city.api.app import create_app

app = create_app()


def run() -> None:
    config = get_api_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
