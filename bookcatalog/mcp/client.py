from httpx import AsyncClient, Response

from bookcatalog.config import API_PREFIX


class BookCatalogClient:
    """Thin wrapper around httpx.AsyncClient that talks to the books API and
    translates HTTP responses into dicts suitable for MCP tool returns."""

    def __init__(self, http: AsyncClient, prefix: str = API_PREFIX) -> None:
        self.http = http
        self.prefix = prefix

    def books_path(self, book_id: int | None = None) -> str:
        path = f"{self.prefix}/books"
        return path if book_id is None else f"{path}/{book_id}"

    async def get(self, path: str, **kwargs) -> dict:
        resp = await self.http.get(path, **kwargs)
        return self._handle(resp)

    async def post(self, path: str, **kwargs) -> dict:
        resp = await self.http.post(path, **kwargs)
        return self._handle(resp)

    async def put(self, path: str, **kwargs) -> dict:
        resp = await self.http.put(path, **kwargs)
        return self._handle(resp)

    async def delete(self, path: str, **kwargs) -> dict:
        resp = await self.http.delete(path, **kwargs)
        return self._handle(resp)

    def _handle(self, resp: Response) -> dict:
        if resp.status_code >= 500:
            raise RuntimeError(f"Server error {resp.status_code}: {resp.text}")
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            detail = body.get("error", resp.text) if isinstance(body, dict) else resp.text
            return {"error": True, "status": resp.status_code, "detail": detail}
        return resp.json()
