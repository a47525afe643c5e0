"""
tests/unit/test_prompts.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for prompt assembly.
"""
from __future__ import annotations

from pdgen.config.prompts import DESCRIPTION_SECTIONS, build_user_message
from pdgen.domain.models import PayScaleGrade, PositionRequest

_REQUEST = PositionRequest(
    job_title="IT Specialist",
    department="Office of the CIO",
    pay_scale_grade=PayScaleGrade.GS_13,
    job_family="2200",
    series="2210",
)


def test_fields_rendered():
    message = build_user_message(_REQUEST)
    assert "Job Title: IT Specialist" in message
    assert "Department: Office of the CIO" in message
    assert "Pay Scale and Grade: GS-13" in message
    assert "Job Family: 2200\n" in message
    assert "Series: 2210\n" in message


def test_titles_appended_when_known():
    message = build_user_message(
        _REQUEST,
        family_title="Information Technology",
        series_title="Information Technology Management",
    )
    assert "Job Family: 2200 (Information Technology)" in message
    assert "Series: 2210 (Information Technology Management)" in message


def test_sections_numbered_in_order():
    message = build_user_message(_REQUEST)
    for i, name in enumerate(DESCRIPTION_SECTIONS, 1):
        assert f"{i}. {name}" in message
    assert message.index("1. About the Role") < message.index("5. Benefits and Perks")
