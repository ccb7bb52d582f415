"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from .app import create_app
from .dependencies import get_config


def main() -> None:
    """Run the local server."""
    config = get_config()
    uvicorn.run(
        create_app(),
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
