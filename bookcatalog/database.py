from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


def create_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Build an async engine for ``url``.

    An in-memory SQLite database lives only as long as its connection, so
    memory URLs share a single connection across every session.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo)


def get_store(request: Request):
    """FastAPI dependency returning the store the app was built with."""
    return request.app.state.store
