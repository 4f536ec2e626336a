"""Emergency contact selection."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from aksha.core.alert_policies import MAX_SELECTED_CONTACTS
from aksha.schemas.contact import Contact

logger = logging.getLogger(__name__)


class SelectionLimitError(ValueError):
    """Raised when selecting more than MAX_SELECTED_CONTACTS contacts."""


class ContactNotFoundError(ValueError):
    """Raised when a contact id is not in the synced contact list."""


class ContactBook:
    """In-memory copy of the device contacts plus the emergency selection.

    Only contacts with at least one phone number are kept. The selection
    lives for the session and is never persisted.
    """

    def __init__(self, max_selected: int = MAX_SELECTED_CONTACTS) -> None:
        self.max_selected = max_selected
        self._contacts: dict[str, Contact] = {}
        self._selected: list[str] = []

    def sync(self, contacts: Iterable[Contact]) -> None:
        """Replace the contact list with what the device reported.

        Selected contacts that disappeared are dropped. If nothing is
        selected afterwards, the first contacts are pre-selected.
        """
        self._contacts = {
            c.id: c for c in contacts if any(n.strip() for n in c.phone_numbers)
        }
        self._selected = [cid for cid in self._selected if cid in self._contacts]
        if not self._selected:
            self._selected = list(self._contacts)[: self.max_selected]
        logger.info("Synced %s contacts with phone numbers (%s selected)", len(self._contacts), len(self._selected))

    def contacts(self) -> list[Contact]:
        return list(self._contacts.values())

    def selected(self) -> list[Contact]:
        """Selected contacts in the order they were selected."""
        return [self._contacts[cid] for cid in self._selected]

    def select(self, contact_id: str) -> Contact:
        contact = self._get(contact_id)
        if contact_id in self._selected:
            return contact
        if len(self._selected) >= self.max_selected:
            raise SelectionLimitError(
                f"Maximum of {self.max_selected} emergency contacts reached. Remove one before adding another."
            )
        self._selected.append(contact_id)
        return contact

    def deselect(self, contact_id: str) -> None:
        self._get(contact_id)
        if contact_id in self._selected:
            self._selected.remove(contact_id)

    def _get(self, contact_id: str) -> Contact:
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise ContactNotFoundError(f"Contact {contact_id} not found")
        return contact


# Singleton instance used across the app
contact_book = ContactBook()
