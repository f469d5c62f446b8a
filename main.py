import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from config import settings
from library import LibraryManager
from notifications import ConsoleEmailNotifier, EmailNotifier, NullEmailNotifier, User
from ui_helpers import set_output_mode, print_list_result, print_loans_result, print_stats_result

DEMO_USER = "user01"
DEMO_BOOKS = [
    ("El Gran Gatsby", "F. Scott Fitzgerald", "123456789"),
    ("1984", "George Orwell", "987654321"),
]


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    # Logs go to stderr so listings on stdout stay parseable
    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_library(email_notifier: Optional[EmailNotifier] = None) -> LibraryManager:
    """Construct the one manager instance for this process."""
    if email_notifier is None:
        email_notifier = ConsoleEmailNotifier() if settings.enable_email_notifications else NullEmailNotifier()
    return LibraryManager(email_notifier)


def seed_demo(lib: LibraryManager) -> User:
    """Register the demo user, add the demo books and lend the first one."""
    user = User(DEMO_USER)
    lib.add_observer(user)
    for title, author, isbn in DEMO_BOOKS:
        lib.add_book(title, author, isbn)
    lib.loan_book(DEMO_BOOKS[0][2], DEMO_USER)
    return user


# --- Typer CLI Application ---
app = typer.Typer(help=settings.app_name)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    configure_logging()
    if output:
        set_output_mode(output)

@app.command("demo")
def cli_demo():
    """Wire up a library, add the demo books and lend one to the demo user."""
    lib = build_library()
    user = seed_demo(lib)
    print(f"{user.user_id} received {len(user.notifications)} new-book notifications")
    print_list_result(lib.list_books())
    print_loans_result(lib.list_loans())
    print_stats_result(lib.get_statistics())

@app.command("search")
def cli_search(query: str):
    """Search the demo catalog by title, author or exact ISBN."""
    lib = build_library(NullEmailNotifier())
    seed_demo(lib)
    print_list_result(lib.search(query), empty_message="No books found.")


if __name__ == "__main__":
    app()
