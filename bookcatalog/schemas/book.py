from pydantic import BaseModel, ConfigDict, field_validator


class BookPayload(BaseModel):
    """Body of POST and PUT. Title and author are checked by the handler so a
    missing one is reported as 400 rather than a schema error."""

    title: str | None = None
    author: str | None = None
    year: int | None = None
    genre: str | None = None

    @field_validator("year", "genre", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # HTML forms submit "" for an untouched optional input
        if isinstance(value, str) and not value.strip():
            return None
        return value


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    year: int | None = None
    genre: str | None = None


class BookEnvelope(BaseModel):
    message: str = "success"
    data: BookResponse


class BookListEnvelope(BaseModel):
    message: str = "success"
    data: list[BookResponse]


class DeleteEnvelope(BaseModel):
    message: str = "deleted"
    changes: int


class ErrorResponse(BaseModel):
    error: str
