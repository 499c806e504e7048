from fastmcp import FastMCP

from bookcatalog.mcp.client import BookCatalogClient
from bookcatalog.mcp.tools.books import (
    add_book as _add_book,
    list_books as _list_books,
    remove_book as _remove_book,
    update_book as _update_book,
)


def create_mcp_server(client: BookCatalogClient) -> FastMCP:
    mcp = FastMCP(
        name="bookcatalog",
        instructions=(
            "Book Catalog keeps a flat list of books with title, author, year and "
            "genre. Use these tools to list, add, edit and remove books. Books are "
            "identified by the numeric id the catalog assigns when they are added."
        ),
    )

    @mcp.tool()
    async def list_books() -> list[dict]:
        """List every book in the catalog."""
        return await _list_books(client)

    @mcp.tool()
    async def add_book(
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> dict:
        """Add a book. Title and author are required; year and genre are optional.
        Returns the stored book including its new id."""
        return await _add_book(client, title=title, author=author, year=year, genre=genre)

    @mcp.tool()
    async def update_book(
        book_id: int,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> dict:
        """Replace all fields of an existing book. Fields left out are cleared."""
        return await _update_book(
            client, book_id=book_id, title=title, author=author, year=year, genre=genre
        )

    @mcp.tool()
    async def remove_book(book_id: int) -> dict:
        """Delete a book by id."""
        return await _remove_book(client, book_id=book_id)

    return mcp
