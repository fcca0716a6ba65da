"""Plain-text and CSV rendering of result lists for download."""

from typing import Iterable

CSV_HEADER = "email"
EXPORT_FORMATS = ("csv", "txt")


def to_csv(emails: Iterable[str]) -> str:
    """Render addresses as a single-column CSV with an 'email' header."""
    return f"{CSV_HEADER}\n" + "\n".join(emails)


def to_text(emails: Iterable[str]) -> str:
    """Render addresses one per line."""
    return "\n".join(emails)


def render(emails: Iterable[str], fmt: str) -> str:
    """Render addresses in the requested export format."""
    if fmt == "csv":
        return to_csv(emails)
    if fmt == "txt":
        return to_text(emails)
    raise ValueError(f"Unsupported export format: {fmt}")


def export_filename(category: str, fmt: str) -> str:
    """Build the download file name, e.g. 'valid_emails.csv' or 'extracted_emails.txt'."""
    return f"{category}_emails.{fmt}"
