# schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from errors import InvalidBookError


class BookBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    published_year: int = Field(alias="publishedYear")

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_serializer("price", when_used="json")
    def price_as_number(self, price: Decimal) -> float:
        return float(price)


class BookCreate(BookBase):
    pass


class BookUpdate(BookBase):
    pass


class Book(BookBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int


def parse_book(model: type[BookBase], payload) -> BookBase:
    """Coerce a schema instance or a plain mapping into ``model``.

    Raises InvalidBookError when the payload is not a well-formed book.
    """
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise InvalidBookError(e.errors(include_url=False, include_context=False)) from e
