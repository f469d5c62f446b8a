from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Book:
    """Represents a single book in the catalog."""

    title: str
    author: str
    isbn: str

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def to_dict(self) -> dict:
        return {"title": self.title, "author": self.author, "isbn": self.isbn}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(title=data["title"], author=data["author"], isbn=data["isbn"])


class BookBuilder:
    """Step-by-step construction of a Book.

    Each setter returns the builder so calls can be chained:

        BookBuilder().title("1984").author("George Orwell").isbn("987").build()
    """

    def __init__(self) -> None:
        self._title: Optional[str] = None
        self._author: Optional[str] = None
        self._isbn: Optional[str] = None

    def title(self, title: str) -> "BookBuilder":
        self._title = title
        return self

    def author(self, author: str) -> "BookBuilder":
        self._author = author
        return self

    def isbn(self, isbn: str) -> "BookBuilder":
        self._isbn = isbn
        return self

    def build(self) -> Book:
        missing: List[str] = [
            name
            for name, value in (("title", self._title), ("author", self._author), ("isbn", self._isbn))
            if value is None
        ]
        if missing:
            raise ValueError(f"Cannot build book, missing: {', '.join(missing)}.")
        return Book(title=self._title, author=self._author, isbn=self._isbn)
