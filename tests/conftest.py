"""Pytest configuration and fixtures."""

import pytest
import structlog

from actionkit.capabilities import Capabilities
from tests.helpers.constants import NOW
from tests.helpers.mocks import MockHttp, MockReader, MockSigner, MockWriter


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo global structlog configuration (e.g. from cli.main) bound to captured streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def reader() -> MockReader:
    """Empty contract reader; tests register responses with reader.add()."""
    return MockReader()


@pytest.fixture
def signer() -> MockSigner:
    return MockSigner()


@pytest.fixture
def writer() -> MockWriter:
    """Writer reporting a successful submission."""
    return MockWriter()


@pytest.fixture
def http() -> MockHttp:
    return MockHttp()


@pytest.fixture
def capabilities(reader, signer, writer, http) -> Capabilities:
    """Capabilities wired to mocks with a fixed clock."""
    return Capabilities(
        reader=reader,
        signer=signer,
        writer=writer,
        http=http,
        clock=lambda: NOW,
    )
