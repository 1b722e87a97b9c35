import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from schemas import Book, BookCreate


def test_accepts_wire_and_python_field_names():
    a = BookCreate.model_validate({"title": "Emma", "author": "Jane Austen", "price": 8, "publishedYear": 1815})
    b = BookCreate(title="Emma", author="Jane Austen", price=8, published_year=1815)
    assert a == b


def test_strips_title_and_author():
    book = BookCreate(title="  Emma ", author=" Jane Austen", price=8, published_year=1815)
    assert book.title == "Emma"
    assert book.author == "Jane Austen"


@pytest.mark.parametrize(
    "field, value",
    [("title", ""), ("author", "   "), ("price", 0), ("price", -1), ("price", "12.345"), ("price", "1234567890.5")],
)
def test_rejects_malformed_fields(field, value):
    data = {"title": "Emma", "author": "Jane Austen", "price": 8, "publishedYear": 1815, field: value}
    with pytest.raises(ValidationError):
        BookCreate.model_validate(data)


def test_create_ignores_unknown_fields():
    book = BookCreate.model_validate({"id": 7, "title": "Emma", "author": "Jane Austen", "price": 8, "publishedYear": 1815})
    assert not hasattr(book, "id")


def test_book_json_uses_wire_names_and_numeric_price():
    book = Book(id=1, title="1984", author="George Orwell", price=Decimal("29.99"), published_year=1949)
    data = json.loads(book.model_dump_json(by_alias=True))
    assert data == {"id": 1, "title": "1984", "author": "George Orwell", "price": 29.99, "publishedYear": 1949}


def test_price_keeps_two_decimal_places_exactly():
    book = BookCreate(title="Emma", author="Jane Austen", price="12.34", published_year=1815)
    assert book.price == Decimal("12.34")
