#!/usr/bin/env python3
"""
Main entry point for the TinyLink service.

Storage: PostgreSQL when DATABASE_URL is reachable at startup, otherwise an
in-process store. If the database connection is lost later, the service keeps
running on the in-process store until it is restarted.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL (empty for in-memory only)
    DATABASE_CREATE_TABLES - Create the links table on startup (default true)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from tinylink.allocator import CodeAllocator
from tinylink.database import open_link_store
from tinylink.service import LinkService
from tinylink.shortcode import ShortCodeGenerator
from tinylink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the link store on startup and close it on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting TinyLink service...")

    store = await open_link_store(
        database_url=config.database_url,
        pool_max_size=config.database_pool_max_size,
        connection_timeout_seconds=config.database_connect_timeout_seconds,
        create_tables=config.database_create_tables,
        logger=logger,
    )

    allocator = CodeAllocator(
        store,
        generator=ShortCodeGenerator(default_length=config.short_code_length),
        max_attempts=config.max_collision_retries,
        logger=logger,
    )
    service = LinkService(store=store, allocator=allocator, logger=logger)
    app.state.service = service

    logger.info(f"Service started, storage backend: {store.name}")

    yield

    logger.info("Shutting down TinyLink service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("TinyLink Service")
    # The URL may carry a password
    logger.debug(f"Configuration: {config.model_dump(exclude={'database_url'})}")

    app = create_app(service_instance=None, config=config, lifespan=lifespan)
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
