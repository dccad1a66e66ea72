"""DNS-01 challenge providers."""

from godaddy_dns.providers.base import ChallengeProvider
from godaddy_dns.providers.godaddy import GoDaddyDnsProvider, extract_record_name

__all__ = ["ChallengeProvider", "GoDaddyDnsProvider", "extract_record_name"]
