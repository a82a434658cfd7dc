"""Domain value objects for the comment widget.

Value objects are immutable and defined by their values, not identity.
"""

import hashlib
import re

from pydantic import field_validator

from murmur.domain.value.common import RootValueObject


def normalize_email(email: str) -> str:
    """Trim and lowercase an email so case/whitespace variants collapse."""
    return email.strip().lower()


class EmailHash(RootValueObject[str]):
    """Identity hash: hex MD5 digest of a normalized email.

    Serves as the public pseudonymous identifier of a commenter, the admin
    filter key, and the avatar cache key. It is a privacy mitigation, not a
    security boundary: there is no keyed secret, so the value is stable
    across restarts and deployments.
    """

    @field_validator("root")
    @classmethod
    def validate_digest(cls, v: str) -> str:
        """Validate hex digest format."""
        if not re.match(r"^[0-9a-f]{32}$", v):
            raise ValueError("Email hash must be a 32 character hex digest")
        return v

    @classmethod
    def from_email(cls, email: str) -> "EmailHash":
        """Hash an email after normalizing it."""
        digest = hashlib.md5(
            normalize_email(email).encode("utf-8"), usedforsecurity=False
        ).hexdigest()
        return cls(digest)
