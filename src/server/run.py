"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from src.common.config import Config
from src.common.logger import setup_logger

from .app import create_app


def main() -> None:
    """Run the server."""
    config = Config.load()
    setup_logger(log_level=config.log_level, log_file=config.log_file)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
