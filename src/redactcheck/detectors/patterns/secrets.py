"""Tier-1 (SECRET) detection rules.

This module contains the rules for directly usable credentials. All but
one are key/value rules: a secret-bearing key name, an optional closing
quote (JSON and quoted YAML keys), a ``:`` or ``=`` separator and a
non-blank value. The remaining rule is structural and matches PEM
private-key header lines regardless of any key/value shape.

Key names may not be the lowercase tail of a longer word, so ``bypass=1``
is not a password while ``db_password=...`` and ``adminPassword=...`` are.
"""

from redactcheck.core.models import MatchKind, Tier
from redactcheck.detectors.patterns import PatternRule


# Start of a word, or a camelCase hump (the P in adminPassword)
_KEY_START = r"(?:(?<![A-Za-z])|(?<=[a-z])(?=[A-Z]))"


def _key_value(keys: str) -> str:
    """Return a key/value regex for the given key-name alternation."""
    return (
        _KEY_START + r"(?P<key>(?i:" + keys + r"))['\"]?"
        r"(?P<sep>\s*[:=]\s*)(?P<value>\S+)"
    )


PASSWORD = PatternRule(
    label="PASSWORD",
    tier=Tier.T1,
    regex=_key_value(r"password|passwd|pass"),
    match_kind=MatchKind.KEY_VALUE,
    description="Password assignment - plaintext password in code or config",
)

API_KEY = PatternRule(
    label="API_KEY",
    tier=Tier.T1,
    regex=_key_value(r"api[_-]?key"),
    match_kind=MatchKind.KEY_VALUE,
    description="API key assignment",
)

SECRET = PatternRule(
    label="SECRET",
    tier=Tier.T1,
    regex=_key_value(r"secret[_-]?access[_-]?key|secret[_-]?key|secret"),
    match_kind=MatchKind.KEY_VALUE,
    description="Secret or secret key assignment",
)

TOKEN = PatternRule(
    label="TOKEN",
    tier=Tier.T1,
    regex=_key_value(r"auth[_-]?token|access[_-]?token|token"),
    match_kind=MatchKind.KEY_VALUE,
    description="Authentication or access token assignment",
)

PRIVATE_KEY = PatternRule(
    label="PRIVATE_KEY",
    tier=Tier.T1,
    regex=_key_value(r"private[_-]?key|priv[_-]?key"),
    match_kind=MatchKind.KEY_VALUE,
    description="Private key value assignment",
)

MASTER_KEY = PatternRule(
    label="MASTER_KEY",
    tier=Tier.T1,
    regex=_key_value(r"master[_-]?key"),
    match_kind=MatchKind.KEY_VALUE,
    description="Master key assignment (vaults, password managers, KMS)",
)

CREDENTIAL = PatternRule(
    label="CREDENTIAL",
    tier=Tier.T1,
    regex=_key_value(r"credentials?|creds?"),
    match_kind=MatchKind.KEY_VALUE,
    description="Generic credential assignment",
)

SSH_KEY = PatternRule(
    label="SSH_KEY",
    tier=Tier.T1,
    regex=(
        r"-----BEGIN (?:(?:RSA|EC|DSA|OPENSSH|ENCRYPTED|PGP) )?"
        r"PRIVATE KEY(?: BLOCK)?-----"
    ),
    match_kind=MatchKind.STRUCTURAL,
    description="PEM private key block header (RSA, EC, DSA, OpenSSH, PKCS#8, PGP)",
)


# Declaration order is evaluation order
SECRET_PATTERNS: tuple[PatternRule, ...] = (
    PASSWORD,
    API_KEY,
    SECRET,
    TOKEN,
    PRIVATE_KEY,
    MASTER_KEY,
    CREDENTIAL,
    SSH_KEY,
)
