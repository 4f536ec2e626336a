"""Secret-box encryption for local storage and bearer token inspection."""

from __future__ import annotations

from datetime import datetime, timezone

from jose import JWTError, jwt
from nacl import secret
from nacl.encoding import Base64Encoder, RawEncoder
from nacl.exceptions import CryptoError
from nacl.hash import blake2b


def build_secret_box(passphrase: str) -> secret.SecretBox:
    """Derive a SecretBox key from the configured passphrase."""
    key = blake2b(
        passphrase.encode(),
        digest_size=secret.SecretBox.KEY_SIZE,
        encoder=RawEncoder,
    )
    return secret.SecretBox(key)


def encrypt_value(box: secret.SecretBox, value: str) -> str:
    return box.encrypt(value.encode(), encoder=Base64Encoder).decode()


def decrypt_value(box: secret.SecretBox, sealed: str) -> str | None:
    """Open a sealed value. Returns None if it was sealed with another key or is corrupt."""
    try:
        return box.decrypt(sealed.encode(), encoder=Base64Encoder).decode()
    except (CryptoError, ValueError):
        return None


def token_expired(token: str, now: datetime | None = None) -> bool:
    """True if token is a JWT whose exp claim is in the past.

    Tokens are issued by the backend; the signature is not checked here.
    Opaque (non-JWT) tokens and tokens without exp never count as expired.
    """
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return False
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return False
    now = now or datetime.now(timezone.utc)
    return datetime.fromtimestamp(exp, tz=timezone.utc) <= now
