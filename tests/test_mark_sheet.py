"""Tests for the mark sheet service (validation, ranking, summary statistics)."""

from __future__ import annotations

import logging
import math

import pytest

from domain.errors import InvalidMarkError, ReportError
from services.mark_sheet import MarkSheet, validate_mark
from factories import make_sheet


def test_validate_mark_accepts_numbers_and_numeric_strings():
    assert validate_mark(85).valid
    result = validate_mark("72.5")
    assert result.valid and result.mark == 72.5
    assert validate_mark(0).valid
    assert validate_mark(100).valid


@pytest.mark.parametrize("value", [None, "abc", "", math.nan, [1]])
def test_validate_mark_rejects_non_numbers(value):
    result = validate_mark(value)
    assert not result.valid
    assert result.error == "Mark must be a valid number"


@pytest.mark.parametrize("value", [-1, 100.5, "101"])
def test_validate_mark_rejects_out_of_range(value):
    result = validate_mark(value)
    assert not result.valid
    assert result.error == "Mark must be between 0 and 100"


def test_record_rejects_invalid_mark(caplog):
    sheet = MarkSheet("Grade 10A", "Mathematics", 1)
    with caplog.at_level(logging.WARNING, logger="services.mark_sheet"):
        with pytest.raises(InvalidMarkError) as info:
            sheet.record(3, 140)
    assert isinstance(info.value, ReportError)
    assert info.value.context == {
        "class_name": "Grade 10A",
        "subject": "Mathematics",
        "test_number": 1,
        "index": 3,
        "mark": 140,
    }
    assert (info.value.index, info.value.mark) == (3, 140)
    assert info.value.sheet == "Grade 10A / Mathematics / test 1"
    assert "Student 3" in str(info.value)
    assert len(sheet) == 0
    assert any("rejected mark" in r.getMessage() for r in caplog.records)


def test_record_updates_existing_entry_in_place():
    sheet = make_sheet([50, 60])
    sheet.record(1, 65)
    sheet.record(2, None)
    assert len(sheet) == 2
    assert sheet.rows() == [
        {"index": 1, "mark": 65.0, "name": "Student 1"},
        {"index": 2, "mark": None, "name": "Student 2"},
    ]


def test_withdraw():
    sheet = make_sheet([50, 60, 70])
    assert sheet.withdraw(2) is True
    assert sheet.withdraw(99) is False
    assert [r["index"] for r in sheet.rows()] == [1, 3]


def test_ranked_highest_first_with_grades():
    sheet = make_sheet([60, None, 90, 75])
    ranked = sheet.ranked()
    assert [(r["index"], r["grade"]) for r in ranked] == [
        (3, "A+"),
        (4, "B+"),
        (1, "C+"),
        (2, "F"),
    ]
    # entries themselves are not annotated
    assert all("grade" not in r for r in sheet.rows())


def test_ranked_with_stats():
    sheet = make_sheet([60, 90, 75])
    ranked, stats = sheet.ranked(with_stats=True)
    assert [r["index"] for r in ranked] == [2, 3, 1]
    assert stats.array_size == 3
    assert stats.comparisons == 3
    assert stats.swaps == 2


def test_statistics_only_counts_positive_marks():
    sheet = make_sheet([80, 0, None, 70], student_count=5)
    stats = sheet.statistics()
    assert stats.total_students == 5
    assert stats.entered_marks == 2
    assert stats.pending_marks == 3
    assert stats.average == 75.0
    assert stats.highest == 80
    assert stats.lowest == 70
    assert stats.completion_percentage == 40.0


def test_statistics_rounding():
    stats = make_sheet([70, 71, 71]).statistics()
    assert stats.average == 70.67
    assert stats.completion_percentage == 100.0


def test_statistics_when_nothing_entered():
    stats = make_sheet([None, 0]).statistics()
    assert stats.as_dict() == {
        "total_students": 2,
        "entered_marks": 0,
        "pending_marks": 2,
        "average": 0,
        "highest": 0,
        "lowest": 0,
        "completion_percentage": 0,
    }


def test_report_error_sheet_label():
    assert ReportError("bad input").sheet is None
    assert ReportError("x", context={"test_number": 2}).sheet == "test 2"
    assert ReportError("x", context={"class_name": "Grade 9B"}).sheet == "Grade 9B"
