"""Entry point: serve the product catalog API.

Usage:
    python -m src.main
"""

import logging

import uvicorn

from src.api import create_app
from src.config.configuration import get_config


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    config = get_config()
    configure_logging(config.logging.level)

    app = create_app(
        mask_errors=config.api.mask_errors,
        graphiql=config.api.graphiql,
    )

    logging.getLogger(__name__).info(
        f"Server running on http://{config.server.host}:{config.server.port}/graphql"
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=config.logging.level.lower())


if __name__ == "__main__":
    main()
