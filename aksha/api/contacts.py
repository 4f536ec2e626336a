"""Emergency contacts API."""

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.deps import get_contact_book
from aksha.schemas.contact import Contact, ContactBookResponse
from aksha.services.contact_service import ContactBook, ContactNotFoundError, SelectionLimitError

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _book_response(book: ContactBook) -> ContactBookResponse:
    return ContactBookResponse(
        contacts=book.contacts(),
        selected=book.selected(),
        max_selected=book.max_selected,
    )


@router.put("", response_model=ContactBookResponse)
def sync_contacts(data: list[Contact], book: ContactBook = Depends(get_contact_book)):
    """Device shell replaces the contact list. Contacts without a phone number are dropped."""
    book.sync(data)
    return _book_response(book)


@router.get("", response_model=ContactBookResponse)
def list_contacts(book: ContactBook = Depends(get_contact_book)):
    return _book_response(book)


@router.get("/selected", response_model=list[Contact])
def list_selected(book: ContactBook = Depends(get_contact_book)):
    return book.selected()


@router.post("/selected/{contact_id}", response_model=ContactBookResponse)
def select_contact(contact_id: str, book: ContactBook = Depends(get_contact_book)):
    try:
        book.select(contact_id)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SelectionLimitError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _book_response(book)


@router.delete("/selected/{contact_id}", response_model=ContactBookResponse)
def deselect_contact(contact_id: str, book: ContactBook = Depends(get_contact_book)):
    try:
        book.deselect(contact_id)
    except ContactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _book_response(book)
