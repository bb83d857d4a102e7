import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from repox import __version__
from repox.core.app_config import get_config
from repox.logger import get_logger
from repox.middleware import TrustedHeaderIdentityMiddleware
from repox.routers import repository_api as repository_router
from repox.routers import settings_api as settings_router
from repox.routers.dependencies import get_options_store

# Configure basic logging early for the stdlib loggers used by middleware
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan events."""
    config = get_config()
    config.paths.data_dir.mkdir(parents=True, exist_ok=True)
    # First start of a deployment creates its empty options record
    get_options_store().ensure_defaults(config.tenancy.scope)
    logger.info("RepoX started", scope=config.tenancy.scope.value, version=__version__)
    yield


app = FastAPI(title="RepoX", version=__version__, lifespan=lifespan)

if get_config().server.trusted_identity_headers:
    app.add_middleware(TrustedHeaderIdentityMiddleware)


# Register routers
app.include_router(repository_router.router)
app.include_router(settings_router.router)


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Run the RepoX server.

    Args:
        host: Optional host to override config
        port: Optional port number to override config
    """
    config = get_config()
    uvicorn.run(app, host=host or config.server.host, port=port or config.server.port)


def main() -> None:
    """Main entry point with CLI argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="RepoX - install plugins and themes from an external repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  repox                         # Start with configured host and port
  repox --port 9000             # Start on port 9000
  REPOX_TENANCY_SCOPE=network repox
        """,
    )

    parser.add_argument(
        "--host",
        metavar="HOST",
        help="Host interface to bind",
    )

    parser.add_argument(
        "--port",
        type=int,
        metavar="PORT",
        help="Port number to run the server on",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"RepoX {__version__}",
    )

    args = parser.parse_args()

    run_server(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
