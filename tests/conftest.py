"""Pytest configuration and fixtures."""

import logging
import random
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from tinylink.allocator import CodeAllocator
from tinylink.database import FallbackLinkStore, MemoryLinkStore
from tinylink.service import LinkService
from tinylink.shortcode import ShortCodeGenerator
from tinylink.common.logging_config import LOGGER_NAME, setup_logging
from web_app import create_app


class FakeClock:
    """Clock that advances by a fixed step on every reading."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step
        self.readings = []

    def __call__(self) -> datetime:
        value = self.now
        self.now += self.step
        self.readings.append(value)
        return value


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store(clock, logger) -> MemoryLinkStore:
    """Create an empty in-memory store."""
    return MemoryLinkStore(clock=clock, logger=logger)


@pytest.fixture
def store(memory_store, logger) -> FallbackLinkStore:
    """Store as the application holds it: no database configured."""
    return FallbackLinkStore(memory_store, logger=logger)


@pytest.fixture
def short_code_generator():
    """Create a seeded short code generator."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def allocator(store, short_code_generator, logger) -> CodeAllocator:
    return CodeAllocator(store, generator=short_code_generator, logger=logger)


@pytest.fixture
def service(store, allocator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(store=store, allocator=allocator, logger=logger)


@pytest.fixture
def config() -> Config:
    return Config(database_url="", base_url="http://testserver")


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456",
    ]
