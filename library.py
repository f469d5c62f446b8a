import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from book import Book, BookBuilder
from loan import Loan
from notifications import EmailNotifier, LibraryObserver

logger = logging.getLogger(__name__)


class LibraryManager:
    """Manages the in-memory catalog, the active loans and their notifications.

    State is always mutated before observers or the email notifier are called.
    Not-found conditions never raise; they return False (or None) instead.
    """

    def __init__(self, email_notifier: EmailNotifier, observers: Optional[Iterable[LibraryObserver]] = None) -> None:
        self.email_notifier = email_notifier
        self.books: List[Book] = []
        self.loans: List[Loan] = []
        self.observers: List[LibraryObserver] = list(observers or [])

    # ------------------------- Observers ------------------------- #
    def add_observer(self, observer: LibraryObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: LibraryObserver) -> bool:
        """Unsubscribe the first registration of `observer`. Returns False if it was not registered."""
        for index, registered in enumerate(self.observers):
            if registered is observer:
                del self.observers[index]
                return True
        return False

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        """Add a book to the catalog and announce it. Duplicate ISBNs are allowed."""
        book = BookBuilder().title(title).author(author).isbn(isbn).build()
        self.books.append(book)
        logger.info(f"Book added: {book}")
        self._notify_observers(book)
        return book

    def remove_book(self, isbn: str) -> bool:
        index = self._find_book_index(isbn)
        if index is None:
            logger.warning(f"Cannot remove book, ISBN {isbn} not found.")
            return False
        removed = self.books.pop(index)
        logger.info(f"Book removed: {removed}")
        return True

    def search(self, query: str) -> List[Book]:
        """Books whose title or author contains `query`, or whose ISBN equals it."""
        return [
            book for book in self.books
            if query in book.title or query in book.author or book.isbn == query
        ]

    def loan_book(self, isbn: str, user_id: str) -> bool:
        book = self.find_book(isbn)
        if not book:
            logger.warning(f"Cannot loan book, ISBN {isbn} not found.")
            return False
        self.loans.append(Loan(isbn=isbn, user_id=user_id, date=datetime.now()))
        logger.info(f"Book {isbn} loaned to {user_id}")
        self._send_email(user_id, f"You have borrowed the book {book.title}")
        return True

    def return_book(self, isbn: str, user_id: str) -> bool:
        for index, loan in enumerate(self.loans):
            if loan.isbn == isbn and loan.user_id == user_id:
                del self.loans[index]
                logger.info(f"Book {isbn} returned by {user_id}")
                self._send_email(user_id, f"You have returned the book with ISBN {isbn}. Thank you!")
                return True
        logger.warning(f"Cannot return book, no loan of ISBN {isbn} for {user_id}.")
        return False

    # ------------------------- Queries ------------------------- #
    def find_book(self, isbn: str) -> Optional[Book]:
        index = self._find_book_index(isbn)
        return self.books[index] if index is not None else None

    def list_books(self) -> List[Book]:
        return list(self.books)

    def list_loans(self) -> List[Loan]:
        return list(self.loans)

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "total_books": len(self.books),
            "unique_authors": len({book.author for book in self.books}),
            "active_loans": len(self.loans),
        }

    # ------------------------- Helpers ------------------------- #
    def _find_book_index(self, isbn: str) -> Optional[int]:
        for index, book in enumerate(self.books):
            if book.isbn == isbn:
                return index
        return None

    def _send_email(self, user_id: str, message: str) -> None:
        self.email_notifier.send(user_id, message)

    def _notify_observers(self, book: Book) -> None:
        for observer in self.observers:
            observer.update(book)
