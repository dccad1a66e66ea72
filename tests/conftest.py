"""Pytest fixtures for the godaddy_dns test suite."""

import json
import logging
import logging.handlers
from collections.abc import Generator

import httpx
import pytest
import respx

from godaddy_dns.config import GoDaddyConfig
from godaddy_dns.providers.godaddy import GoDaddyDnsProvider

RECORD_URL_PATTERN = (
    r"^https://api\.godaddy\.com/v1/domains/(?P<domain>[^/]+)/records/TXT/(?P<name>[^/]+)$"
)


class FakeRecordStore:
    """In-memory stand-in for the GoDaddy TXT record endpoints.

    Serves GET/PUT/DELETE on /v1/domains/{domain}/records/TXT/{name}
    the way the real API does: GET returns a (possibly empty) list, PUT
    replaces the list, DELETE answers 204 or 404.
    """

    def __init__(self) -> None:
        self.records: dict[tuple[str, str], list[dict]] = {}
        self.requests: list[httpx.Request] = []

    def seed(self, domain: str, name: str, data: str, **fields) -> None:
        """Pre-populate a TXT record."""
        self.records[(domain, name)] = [{"name": name, "type": "TXT", "data": data, **fields}]

    def calls(self, method: str) -> list[httpx.Request]:
        """Requests received with the given HTTP method."""
        return [r for r in self.requests if r.method == method]

    def handle(self, request: httpx.Request, domain: str, name: str) -> httpx.Response:
        self.requests.append(request)
        key = (domain, name)

        if request.method == "GET":
            return httpx.Response(200, json=self.records.get(key, []))

        if request.method == "PUT":
            self.records[key] = json.loads(request.content)
            return httpx.Response(200)

        if request.method == "DELETE":
            if self.records.pop(key, None) is None:
                return httpx.Response(
                    404, json={"code": "NOT_FOUND", "message": "Record not found"}
                )
            return httpx.Response(204)

        return httpx.Response(405)


@pytest.fixture
def record_store() -> Generator[FakeRecordStore]:
    """Mock the GoDaddy API with an in-memory record store."""
    store = FakeRecordStore()
    with respx.mock(assert_all_called=False) as router:
        router.route(url__regex=RECORD_URL_PATTERN).mock(side_effect=store.handle)
        yield store


@pytest.fixture
def config() -> GoDaddyConfig:
    """Configuration with dummy credentials."""
    return GoDaddyConfig(api_key="test-key", api_secret="test-secret")


@pytest.fixture
def resolved_zones() -> list[str]:
    """FQDNs passed to the static zone resolver."""
    return []


@pytest.fixture
def provider(config: GoDaddyConfig, resolved_zones: list[str]) -> Generator[GoDaddyDnsProvider]:
    """Provider whose zone resolver always answers example.com."""

    def static_zone(fqdn: str, nameservers: list[str]) -> str:
        resolved_zones.append(fqdn)
        return "example.com."

    provider = GoDaddyDnsProvider(config, zone_resolver=static_zone)
    yield provider
    provider.close()


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name prefix."""
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name prefix."""
        return [r.getMessage() for r in self.get_records(level, name)]


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the godaddy_dns library during a test."""
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    library_logger = logging.getLogger("godaddy_dns")
    original_level = library_logger.level
    library_logger.setLevel(logging.DEBUG)
    library_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        library_logger.removeHandler(handler)
        library_logger.setLevel(original_level)
        handler.close()
