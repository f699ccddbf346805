"""Password hashing."""

import hashlib
import hmac


class PasswordEncoder:
    """SHA-256 password encoder.

    The lobby server and the website verify passwords against the same
    column, so the hash format is fixed to an unsalted SHA-256 hex digest.
    """

    def encode(self, raw_password: str) -> str:
        return hashlib.sha256(raw_password.encode("utf-8")).hexdigest()

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return hmac.compare_digest(self.encode(raw_password), encoded_password)


def legacy_md5(raw_password: str) -> str:
    """MD5 hex digest as expected by the Anope IRC services."""
    return hashlib.md5(raw_password.encode("utf-8")).hexdigest()
