#!/usr/bin/env python3
"""Entrypoint for running the random string service."""

import argparse
import logging

import uvicorn
from prometheus_fastapi_instrumentator import Instrumentator

from randstr_service import create_app
from randstr_service.backend.dependencies import build_app_dependencies
from randstr_service.common import CONTENT_URI, ServiceConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

LOGGER = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Run the random string service")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy URL of the local history database (default: $DATABASE_URL or a local SQLite file)",
    )
    parser.add_argument(
        "--provider-url",
        type=str,
        default=None,
        help="HTTP base URL of the content provider (default: $PROVIDER_URL)",
    )
    parser.add_argument(
        "--provider-timeout",
        type=float,
        default=None,
        help="Timeout in seconds for a single provider query",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind the server to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind the server to",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (development only)",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    config = ServiceConfig.from_env().with_overrides(
        database_url=args.database_url,
        provider_url=args.provider_url,
        provider_timeout=args.provider_timeout,
    )

    LOGGER.info("=" * 80)
    LOGGER.info("STARTING RANDOM STRING SERVICE")
    LOGGER.info("=" * 80)
    LOGGER.info("Provider: %s -> %s", CONTENT_URI, config.provider_url)
    LOGGER.info("Provider timeout: %.1fs", config.provider_timeout)
    LOGGER.info("I/O workers: %d", config.io_workers)
    LOGGER.info("=" * 80)

    LOGGER.info("Initialising database...")
    deps = build_app_dependencies(config)
    LOGGER.info("Database ready.")

    app = create_app(deps)

    Instrumentator().instrument(app).expose(app)

    LOGGER.info("Service ready!")
    LOGGER.info("Swagger UI: http://%s:%d/docs", args.host, args.port)
    LOGGER.info("Metrics: http://%s:%d/metrics", args.host, args.port)

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
