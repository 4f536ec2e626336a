"""Encrypted key-value storage for the auth token and user profile."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from aksha.core.security import build_secret_box, decrypt_value, encrypt_value
from aksha.models.secure_item import SecureItem

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "aksha_auth_token"
USER_DATA_KEY = "aksha_user_data"


class SecureStore:
    """Values are sealed with a SecretBox before they reach the database."""

    def __init__(self, db: Session, passphrase: str) -> None:
        self.db = db
        self._box = build_secret_box(passphrase)

    def get_item(self, key: str) -> str | None:
        item = self.db.get(SecureItem, key)
        if item is None:
            return None
        value = decrypt_value(self._box, item.value)
        if value is None:
            logger.warning("Stored value for %s could not be decrypted; treating as missing", key)
        return value

    def set_item(self, key: str, value: str) -> None:
        sealed = encrypt_value(self._box, value)
        item = self.db.get(SecureItem, key)
        if item:
            item.value = sealed
        else:
            self.db.add(SecureItem(key=key, value=sealed))
        self.db.commit()

    def delete_item(self, key: str) -> None:
        item = self.db.get(SecureItem, key)
        if item:
            self.db.delete(item)
            self.db.commit()
