"""Pytest configuration and fixtures."""

import pytest

from readable.pipeline import build_document


LEASE_TEXT = (
    "Your rent payment is due on March 1, 2024. "
    "The monthly rent is $1,250.00 for the apartment. "
    "Late fees of $50.00 apply after five days. "
    "Contact the landlord with questions."
)


@pytest.fixture
def lease_text():
    """Short tenancy notice with dates and amounts."""
    return LEASE_TEXT


@pytest.fixture
def lease_doc():
    """Document built from the tenancy notice."""
    return build_document(LEASE_TEXT)


@pytest.fixture
def plain_doc():
    """Document with no dates, amounts or overlap with odd questions."""
    return build_document("The garden is green. Birds sing in the morning.")


@pytest.fixture
def text_file(tmp_path):
    """Write text to a temporary UTF-8 file and return its path."""

    def _write(content: str, name: str = "input.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
