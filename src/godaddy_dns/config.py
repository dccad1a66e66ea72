"""Configuration for the GoDaddy DNS provider."""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from godaddy_dns.dns_util import RECURSIVE_NAMESERVERS
from godaddy_dns.exceptions import MissingCredentialsError

DEFAULT_BASE_URL = "https://api.godaddy.com"
OTE_BASE_URL = "https://api.ote-godaddy.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GoDaddyConfig:
    """Credentials and connection settings for one GoDaddy account."""

    api_key: str
    api_secret: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    nameservers: tuple[str, ...] = tuple(RECURSIVE_NAMESERVERS)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_secret:
            raise MissingCredentialsError()
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got: {self.timeout}")


def _default_base_url(env: Mapping[str, str]) -> str:
    if env.get("GODADDY_OTE", "").strip().lower() in ("1", "true", "yes"):
        return OTE_BASE_URL
    return DEFAULT_BASE_URL


def load_config(
    nameservers: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> GoDaddyConfig:
    """Load configuration from environment variables.

    Reads ``GODADDY_API_KEY`` and ``GODADDY_API_SECRET``, and optionally
    ``GODADDY_BASE_URL`` or ``GODADDY_OTE`` (selects the OTE test environment
    when no base URL is given).

    Args:
        nameservers: Recursive nameservers used for zone lookup.
        environ: Mapping to read instead of ``os.environ``.

    Raises:
        MissingCredentialsError: If the key or secret is unset or empty.
    """
    env = os.environ if environ is None else environ
    return GoDaddyConfig(
        api_key=env.get("GODADDY_API_KEY", ""),
        api_secret=env.get("GODADDY_API_SECRET", ""),
        base_url=env.get("GODADDY_BASE_URL") or _default_base_url(env),
        nameservers=tuple(nameservers) if nameservers is not None else tuple(RECURSIVE_NAMESERVERS),
    )
