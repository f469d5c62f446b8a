"""
Notification capabilities used by the library manager.

Two narrow interfaces live here:
- EmailNotifier: sends a message to a user (loan and return confirmations)
- LibraryObserver: receives notice of a newly added book

The manager depends only on these interfaces, so any implementation can be
injected (a console stub, a no-op notifier, a test double).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from book import Book
from config import settings

logger = logging.getLogger(__name__)


class EmailNotifier(ABC):
    """Sends a message to a user. Fire-and-forget, no delivery guarantee."""

    @abstractmethod
    def send(self, user_id: str, message: str) -> None:
        pass


class ConsoleEmailNotifier(EmailNotifier):
    """Stub transport: writes the email to the log instead of sending it."""

    def __init__(self, sender: str | None = None) -> None:
        self.sender = sender or settings.smtp_from_name

    def send(self, user_id: str, message: str) -> None:
        logger.info(f"[{self.sender}] Sending email to {user_id}: {message}")


class NullEmailNotifier(EmailNotifier):
    """Drops every message. Used when email notifications are disabled."""

    def send(self, user_id: str, message: str) -> None:
        return None


class LibraryObserver(ABC):
    """Receives notice of books added to the catalog."""

    @abstractmethod
    def update(self, book: Book) -> None:
        pass


class User(LibraryObserver):
    """A registered library user subscribed to new-book announcements."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.notifications: List[Book] = []

    def update(self, book: Book) -> None:
        self.notifications.append(book)
        logger.info(f'{self.user_id} received a notification about the book "{book.title}"')

    def __repr__(self) -> str:
        return f"User({self.user_id!r})"
