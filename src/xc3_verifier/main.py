"""Entrypoint: run the XC3 verifier server."""

import uvicorn

from xc3_verifier.api.app import create_app
from xc3_verifier.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
