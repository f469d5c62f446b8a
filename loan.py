from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Loan:
    """A book (referenced by ISBN) lent to a user at a point in time."""

    isbn: str
    user_id: str
    date: datetime

    def to_dict(self) -> dict:
        return {"isbn": self.isbn, "user_id": self.user_id, "date": self.date.isoformat()}
