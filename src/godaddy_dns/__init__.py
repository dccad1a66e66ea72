"""godaddy_dns - ACME DNS-01 challenge solver for GoDaddy DNS."""

from godaddy_dns.client import GoDaddyClient
from godaddy_dns.config import GoDaddyConfig, load_config
from godaddy_dns.providers import ChallengeProvider, GoDaddyDnsProvider

__all__ = [
    "ChallengeProvider",
    "GoDaddyClient",
    "GoDaddyConfig",
    "GoDaddyDnsProvider",
    "load_config",
]
__version__ = "0.1.0"
