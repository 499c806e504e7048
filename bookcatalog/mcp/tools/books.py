from bookcatalog.mcp.client import BookCatalogClient


def _book_body(title: str, author: str, year: int | None, genre: str | None) -> dict:
    return {"title": title, "author": author, "year": year, "genre": genre}


async def list_books(client: BookCatalogClient) -> list[dict]:
    result = await client.get(client.books_path())
    if result.get("error"):
        return []
    return result["data"]


async def add_book(
    client: BookCatalogClient,
    title: str,
    author: str,
    year: int | None = None,
    genre: str | None = None,
) -> dict:
    result = await client.post(client.books_path(), json=_book_body(title, author, year, genre))
    if result.get("error"):
        return result
    return result["data"]


async def update_book(
    client: BookCatalogClient,
    book_id: int,
    title: str,
    author: str,
    year: int | None = None,
    genre: str | None = None,
) -> dict:
    result = await client.put(
        client.books_path(book_id), json=_book_body(title, author, year, genre)
    )
    if result.get("error"):
        return result
    return result["data"]


async def remove_book(client: BookCatalogClient, book_id: int) -> dict:
    return await client.delete(client.books_path(book_id))
