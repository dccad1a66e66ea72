"""Logging utilities for the godaddy_dns library."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# NullHandler on the package logger so the library stays silent by default
_root = logging.getLogger("godaddy_dns")
_root.addHandler(logging.NullHandler())

# Challenge currently being solved, for log records emitted by the client
_current_challenge: ContextVar[dict[str, str] | None] = ContextVar(
    "current_challenge", default=None
)


@contextmanager
def challenge_context(domain: str, fqdn: str) -> Iterator[None]:
    """Tag log records emitted inside the block with the challenge being solved.

    Args:
        domain: The domain the certificate is requested for.
        fqdn: The fully qualified name of the challenge TXT record.
    """
    token = _current_challenge.set({"domain": domain, "fqdn": fqdn})
    try:
        yield
    finally:
        _current_challenge.reset(token)


def get_challenge_extra() -> dict[str, str]:
    """Get challenge info for log extra fields.

    Returns:
        Dict with 'domain' and 'fqdn', or an empty dict outside a challenge.
    """
    challenge = _current_challenge.get()
    if challenge is None:
        return {}
    return dict(challenge)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the godaddy_dns namespace.

    Args:
        name: The module name (typically __name__).
    """
    return logging.getLogger(name)


class Timer:
    """Context manager measuring wall-clock time of a block in milliseconds."""

    def __init__(self) -> None:
        self.elapsed_ms: float = 0
        self._start: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
