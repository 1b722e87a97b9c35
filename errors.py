# errors.py
class BookStoreError(Exception):
    """Base class for registry errors."""


class BookNotFoundError(BookStoreError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Kitap bulunamadı: {book_id}")


class InvalidBookError(BookStoreError):
    """Raised when a payload handed to a registry is not a well-formed book."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"Invalid book: {len(errors)} validation error(s)")
