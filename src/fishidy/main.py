"""Standalone server entrypoint."""

import uvicorn

from fishidy.api.app import create_app
from fishidy.config import Settings
from fishidy.containers import build_container


def main() -> None:
    """Run the API with uvicorn on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
