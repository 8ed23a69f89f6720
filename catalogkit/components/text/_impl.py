"""
Text helpers - string trimming, casing and regex extraction.

Functional Core - pure functions over str. All helpers are Unicode
aware; regex character classes for digits, e-mail addresses and
password rules are restricted to ASCII.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from .models import TextValidationError

EMAIL_PATTERN = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE | re.ASCII)
DIGITS_PATTERN = re.compile(r"\d+", re.ASCII)
PASSWORD_PATTERN = re.compile(r"(?=.*[A-Z])(?=.*[0-9]).{8,}")

PASSWORD_MIN_LENGTH = 8
DEFAULT_MASK = "..."


# --- Characters & Names ---


def first_and_last_char(text: str) -> tuple[str, str]:
    """First and last character, or ("", "") for an empty string."""
    if not text:
        return "", ""
    return text[0], text[-1]


def build_full_name(first: str, last: str) -> str:
    """Join trimmed first and last name with a single space."""
    return f"{first.strip()} {last.strip()}".strip()


def to_title_case(phrase: str) -> str:
    """
    Upper-case the first letter of every word.

    Whitespace runs collapse to a single space; the rest of each word
    is left as is.
    """
    return " ".join(word[0].upper() + word[1:] for word in phrase.split())


def extract_file_name(path: str) -> str:
    """Text after the last '/', or the whole path when there is none."""
    return path.rpartition("/")[2]


# --- Tags ---


def tags_to_csv(tags: Iterable[Any]) -> str:
    """Join string tags with ', '. Non-string entries are skipped."""
    return ", ".join(tag.strip() for tag in tags if isinstance(tag, str))


def csv_to_tags(csv: str) -> list[str]:
    """Split a comma separated list into trimmed tags."""
    if csv == "":
        return []
    return [tag.strip() for tag in csv.split(",")]


# --- Encoding ---


def build_search_query(query: str) -> str:
    """Percent-encode query for use inside a URL (RFC 3986)."""
    return quote(query, safe="")


# --- Regex ---


def validate_password(password: str) -> bool:
    """At least 8 characters with one upper-case letter and one digit."""
    return PASSWORD_PATTERN.fullmatch(password) is not None


def password_errors(password: str) -> list[TextValidationError]:
    """Explain which password requirements are not met."""
    errors: list[TextValidationError] = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(
            TextValidationError(
                code="password_too_short",
                message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            )
        )
    if not re.search(r"[A-Z]", password):
        errors.append(
            TextValidationError(
                code="password_no_uppercase",
                message="Password must contain an upper-case letter",
            )
        )
    if not re.search(r"[0-9]", password):
        errors.append(
            TextValidationError(
                code="password_no_digit",
                message="Password must contain a digit",
            )
        )
    if "\n" in password:
        errors.append(
            TextValidationError(
                code="password_multiline",
                message="Password must be a single line",
            )
        )

    return errors


def extract_emails(text: str) -> list[str]:
    """All e-mail addresses in text, in order of appearance."""
    return EMAIL_PATTERN.findall(text)


def mask_numbers(text: str, mask: str = DEFAULT_MASK) -> str:
    """Replace every run of digits with mask."""
    return DIGITS_PATTERN.sub(lambda _match: mask, text)
