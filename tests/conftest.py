from __future__ import annotations

import pytest

from pdfgen.models import PageMetadata


def fake_measure(text: str, font_size: float) -> float:
    return len(text) * font_size * 0.5


@pytest.fixture
def measure():
    return fake_measure


@pytest.fixture
def metadata() -> PageMetadata:
    return PageMetadata(
        author_name="Ivan Petrov",
        subject_name="Physics",
        course_name="Mechanics",
        copyright_string="Edustor",
        contacts_string="ivan@example.com",
        academic_year="2024-2025",
    )
