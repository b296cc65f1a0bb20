"""Main application entry point."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

import uvicorn
from shared import setup_logging, get_logger
from infrastructure.config.settings import get_settings

logger = get_logger(__name__)
settings = get_settings()


def main(host: str = "0.0.0.0", port: int = None):
    """Run the API server."""
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.log_json
    )

    logger.info(
        "starting_server",
        environment=settings.app_env,
        version=settings.app_version,
        config=settings.mask_sensitive()
    )

    uvicorn.run(
        "infrastructure.api.app:app",
        host=host,
        port=port or settings.app_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Shopify Storefront tool router")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port (defaults to APP_PORT)")

    args = parser.parse_args()
    main(host=args.host, port=args.port)
