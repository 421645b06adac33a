"""Tier-2 (RESTRICTED) detection rules.

This module contains rules for network and topology identifiers: RFC 1918
private IPv4 addresses, MAC addresses, CIDR subnets and firmware version
strings. None of these is a usable secret on its own, so findings are
reported verbatim for manual review.
"""

from redactcheck.core.models import MatchKind, Tier
from redactcheck.detectors.patterns import PatternRule

# A single IPv4 octet, 0-255
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"

# Address boundaries: not preceded by a digit or dot, not followed by
# another octet or digit (rules out version strings like 1.10.0.0.1)
_START = r"(?<![\d.])"
_END = r"(?!\.?\d)"


IPV4_PRIVATE_10 = PatternRule(
    label="IPV4_PRIVATE_10",
    tier=Tier.T2,
    regex=_START + r"10(?:\." + _OCTET + r"){3}" + _END,
    match_kind=MatchKind.STRUCTURAL,
    description="Private IP (10.0.0.0/8) - Class A private network address",
)

IPV4_PRIVATE_172 = PatternRule(
    label="IPV4_PRIVATE_172",
    tier=Tier.T2,
    regex=_START + r"172\.(?:1[6-9]|2[0-9]|3[01])(?:\." + _OCTET + r"){2}" + _END,
    match_kind=MatchKind.STRUCTURAL,
    description="Private IP (172.16.0.0/12) - Class B private network address",
)

IPV4_PRIVATE_192 = PatternRule(
    label="IPV4_PRIVATE_192",
    tier=Tier.T2,
    regex=_START + r"192\.168(?:\." + _OCTET + r"){2}" + _END,
    match_kind=MatchKind.STRUCTURAL,
    description="Private IP (192.168.0.0/16) - Class C private network address",
)

MAC_ADDRESS = PatternRule(
    label="MAC_ADDRESS",
    tier=Tier.T2,
    regex=r"\b[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}\b",
    match_kind=MatchKind.STRUCTURAL,
    description="MAC Address - hardware address with ':' or '-' separators",
)

SUBNET_CIDR = PatternRule(
    label="SUBNET_CIDR",
    tier=Tier.T2,
    regex=_START + r"(?:" + _OCTET + r"\.){3}" + _OCTET + r"/(?:3[0-2]|[12]?[0-9])(?!\d)",
    match_kind=MatchKind.STRUCTURAL,
    description="Subnet in CIDR notation",
)

FIRMWARE_VER = PatternRule(
    label="FIRMWARE_VER",
    tier=Tier.T2,
    regex=r"(?i)\bfirmware(?:[ _-]?ver(?:sion)?)?\s*[:=v]\s*v?[0-9]+(?:\.[0-9]+)+",
    match_kind=MatchKind.STRUCTURAL,
    description="Firmware version string - pins a device to known vulnerabilities",
)


# Declaration order is evaluation order
RESTRICTED_PATTERNS: tuple[PatternRule, ...] = (
    IPV4_PRIVATE_10,
    IPV4_PRIVATE_172,
    IPV4_PRIVATE_192,
    MAC_ADDRESS,
    SUBNET_CIDR,
    FIRMWARE_VER,
)
