from typing import Annotated

from fastapi import APIRouter, Depends, Path

from bookcatalog.database import get_store
from bookcatalog.errors import NotFoundError, ValidationError
from bookcatalog.schemas.book import (
    BookEnvelope,
    BookListEnvelope,
    BookPayload,
    BookResponse,
    DeleteEnvelope,
    ErrorResponse,
)
from bookcatalog.store import BookStore

router = APIRouter(prefix="/books", tags=["books"])

# Largest value a SQLite INTEGER column can hold
MAX_BOOK_ID = 2**63 - 1
BookId = Annotated[int, Path(ge=1, le=MAX_BOOK_ID)]


def _require_title_and_author(data: BookPayload) -> tuple[str, str]:
    if not data.title or not data.title.strip() or not data.author or not data.author.strip():
        raise ValidationError()
    return data.title, data.author


@router.get(
    "",
    response_model=BookListEnvelope,
    responses={500: {"model": ErrorResponse}},
)
async def list_books(store: BookStore = Depends(get_store)):
    books = await store.list_all()
    return BookListEnvelope(data=[BookResponse.model_validate(b) for b in books])


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_book(data: BookPayload, store: BookStore = Depends(get_store)):
    title, author = _require_title_and_author(data)
    book_id = await store.insert(title, author, data.year, data.genre)
    return BookEnvelope(
        data=BookResponse(id=book_id, title=title, author=author, year=data.year, genre=data.genre)
    )


@router.put(
    "/{book_id}",
    response_model=BookEnvelope,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def update_book(book_id: BookId, data: BookPayload, store: BookStore = Depends(get_store)):
    title, author = _require_title_and_author(data)
    changes = await store.update(book_id, title, author, data.year, data.genre)
    if changes == 0:
        raise NotFoundError()
    return BookEnvelope(
        data=BookResponse(id=book_id, title=title, author=author, year=data.year, genre=data.genre)
    )


@router.delete(
    "/{book_id}",
    response_model=DeleteEnvelope,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_book(book_id: BookId, store: BookStore = Depends(get_store)):
    changes = await store.delete(book_id)
    if changes == 0:
        raise NotFoundError()
    return DeleteEnvelope(changes=changes)
