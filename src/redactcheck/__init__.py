"""redactcheck - A redaction compliance scanner.

redactcheck inspects files and directories for content that must not leave
the building: Tier-1 secrets (passwords, API keys, tokens, private keys)
and Tier-2 restricted network identifiers (private IPv4 addresses, MAC
addresses, subnets, firmware versions). Secrets are never echoed back in
its own output, and a strict mode turns Tier-1 findings into a failing
exit code for use in automated pipelines.
"""

__version__ = "2.0.0"
