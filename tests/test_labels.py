from __future__ import annotations

from dataclasses import replace

import pytest

from pdfgen.models import Rectangle
from pdfgen.pipeline.labels import (
    BOTTOM_FONT_SIZE,
    MARKER_LABEL_GAP,
    TITLE_BRAND_TEXT,
    TOP_FONT_SIZE,
    brand_name,
    centered_x,
    compute_labels,
    compute_title_page_labels,
)
from pdfgen.pipeline.variants import BRAND_BY_SUBJECT, BRAND_DIGITAL

TARGET = Rectangle(20.0, 21.0, 560.0, 794.0)


def test_right_labels_end_on_target_right(metadata, measure) -> None:
    labels = compute_labels(TARGET, False, metadata, measure, 14.17, BRAND_BY_SUBJECT)
    for item in (labels.top_right, labels.bottom_right):
        assert item.anchor.x + measure(item.text, item.font_size) == pytest.approx(TARGET.right)
    assert labels.top_left.anchor.x == TARGET.left
    assert labels.bottom_left.anchor.x == TARGET.left


def test_reserved_marker_space_shifts_top_labels(metadata, measure) -> None:
    side = 14.17
    labels = compute_labels(TARGET, True, metadata, measure, side, BRAND_BY_SUBJECT)
    assert labels.top_left.anchor.x == pytest.approx(TARGET.left + side + MARKER_LABEL_GAP)
    top_right = labels.top_right
    assert top_right.anchor.x + measure(top_right.text, TOP_FONT_SIZE) == pytest.approx(
        TARGET.right - side - MARKER_LABEL_GAP
    )
    # bottom row ignores the markers
    assert labels.bottom_left.anchor.x == TARGET.left


def test_label_rows_and_texts(metadata, measure) -> None:
    labels = compute_labels(TARGET, True, metadata, measure, 14.17, BRAND_BY_SUBJECT)
    assert labels.top_left.text == "Edustor Digital: Ivan Petrov"
    assert labels.top_right.text == "Physics, Mechanics"
    assert labels.bottom_left.text == "© Edustor 2024-2025"
    assert labels.bottom_right.text == "ivan@example.com"
    assert {labels.top_left.anchor.y, labels.top_right.anchor.y} == {TARGET.top}
    assert {labels.bottom_left.anchor.y, labels.bottom_right.anchor.y} == {TARGET.bottom}
    assert labels.top_left.font_size == TOP_FONT_SIZE
    assert labels.bottom_right.font_size == BOTTOM_FONT_SIZE


def test_labels_without_subject_or_author(metadata, measure) -> None:
    bare = replace(metadata, subject_name="", author_name="")
    labels = compute_labels(TARGET, False, bare, measure, 14.17, BRAND_BY_SUBJECT)
    assert labels.top_left.text == "Edustor Paper"
    assert labels.top_right.text == "Mechanics"

    digital = compute_labels(TARGET, False, bare, measure, 14.17, BRAND_DIGITAL)
    assert digital.top_left.text == "Edustor Digital"


@pytest.mark.parametrize(
    "subject, variant, expected",
    [
        ("Physics", BRAND_BY_SUBJECT, "Edustor Digital"),
        ("", BRAND_BY_SUBJECT, "Edustor Paper"),
        ("", BRAND_DIGITAL, "Edustor Digital"),
        ("Physics", BRAND_DIGITAL, "Edustor Digital"),
    ],
)
def test_brand_name(subject, variant, expected) -> None:
    assert brand_name(subject, variant) == expected


def test_centered_x(measure) -> None:
    assert centered_x(600.0, "abcd", 10.0, measure) == pytest.approx((600.0 - 20.0) / 2)


def test_title_page_labels_are_centered(metadata, measure) -> None:
    page_w, page_h = 595.28, 841.89
    items = compute_title_page_labels((page_w, page_h), metadata, measure)
    assert [item.text for item in items] == [
        "Edustor Digital",
        "Mechanics",
        "Physics",
        "Ivan Petrov",
        "ivan@example.com",
        "© Edustor 2024-2025",
    ]
    for item in items:
        width = measure(item.text, item.font_size)
        assert item.anchor.x * 2 + width == pytest.approx(page_w)
    assert [item.anchor.y for item in items] == pytest.approx(
        [page_h - 50, page_h - 365, page_h - 400, 100, 80, 20]
    )
    assert [item.font_size for item in items] == [18, 20, 30, 18, 10, 10]


def test_title_page_brand_ignores_subject(metadata, measure) -> None:
    bare = replace(metadata, subject_name="")
    items = compute_title_page_labels((595.28, 841.89), bare, measure)
    assert items[0].text == TITLE_BRAND_TEXT == "Edustor Digital"
