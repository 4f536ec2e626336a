"""Contact selection tests."""

import pytest

from aksha.schemas.contact import Contact
from aksha.services.contact_service import ContactBook, ContactNotFoundError, SelectionLimitError


def _contacts(n, start=0):
    return [
        Contact(id=str(i), display_name=f"Friend {i}", phone_numbers=[f"+15550000{i:02d}"])
        for i in range(start, start + n)
    ]


def test_sync_drops_contacts_without_phone_numbers():
    book = ContactBook()
    book.sync([
        Contact(id="a", display_name="Has phone", phone_numbers=["+1555"]),
        Contact(id="b", display_name="No phone", phone_numbers=[]),
        Contact(id="c", display_name="Blank phone", phone_numbers=[" "]),
    ])
    assert [c.id for c in book.contacts()] == ["a"]


def test_sync_preselects_first_five():
    book = ContactBook()
    book.sync(_contacts(7))
    assert [c.id for c in book.selected()] == ["0", "1", "2", "3", "4"]


def test_sixth_selection_is_rejected_and_selection_unchanged():
    book = ContactBook()
    book.sync(_contacts(7))
    before = book.selected()

    with pytest.raises(SelectionLimitError) as exc:
        book.select("6")

    assert "maximum" in str(exc.value).lower()
    assert book.selected() == before


def test_reselecting_is_noop_at_limit():
    book = ContactBook()
    book.sync(_contacts(5))
    book.select("2")
    assert len(book.selected()) == 5


def test_deselect_then_select_another():
    book = ContactBook()
    book.sync(_contacts(7))
    book.deselect("0")
    book.select("6")
    assert [c.id for c in book.selected()] == ["1", "2", "3", "4", "6"]


def test_unknown_contact():
    book = ContactBook()
    with pytest.raises(ContactNotFoundError):
        book.select("nope")


def test_resync_keeps_existing_selection():
    book = ContactBook()
    book.sync(_contacts(3))
    book.deselect("0")
    book.sync(_contacts(4))
    assert [c.id for c in book.selected()] == ["1", "2"]


def test_contacts_api_flow(client):
    r = client.put("/contacts", json=[c.model_dump() for c in _contacts(6)])
    assert r.status_code == 200
    body = r.json()
    assert len(body["contacts"]) == 6
    assert len(body["selected"]) == 5
    assert body["max_selected"] == 5

    r = client.post("/contacts/selected/5")
    assert r.status_code == 409

    r = client.delete("/contacts/selected/0")
    assert r.status_code == 200
    r = client.post("/contacts/selected/5")
    assert r.status_code == 200
    assert [c["id"] for c in client.get("/contacts/selected").json()] == ["1", "2", "3", "4", "5"]


def test_contacts_api_unknown_id(client):
    assert client.post("/contacts/selected/missing").status_code == 404
    assert client.delete("/contacts/selected/missing").status_code == 404
