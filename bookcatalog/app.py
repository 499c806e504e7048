import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookcatalog.config import API_PREFIX, CORS_ORIGINS, DATABASE_URL
from bookcatalog.errors import CatalogError, NotFoundError, ValidationError
from bookcatalog.routers import books
from bookcatalog.store import BookStore

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # A book id that is not even an integer can never have been issued
    if any(err["loc"][:1] == ("path",) for err in errors):
        return await catalog_error_handler(request, NotFoundError())
    first = errors[0] if errors else {}
    loc = tuple(first.get("loc", ()))
    if loc == ("body",) and first.get("type") == "missing":
        return await catalog_error_handler(request, ValidationError())
    if first.get("type") == "json_invalid":
        message = "Malformed JSON body"
    else:
        field = ".".join(str(part) for part in loc[1:]) or "body"
        message = f"Invalid {field}: {first.get('msg', 'malformed request')}"
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(store: BookStore | None = None) -> FastAPI:
    if store is None:
        store = BookStore(DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.initialize()
        try:
            yield
        finally:
            await store.dispose()

    app = FastAPI(title="Book Catalog", version="0.1.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(books.router, prefix=API_PREFIX)
    return app


app = create_app()
