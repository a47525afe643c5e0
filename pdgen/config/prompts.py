"""
config/prompts.py
──────────────────────────────────────────────────────────────────────────────
All LLM prompt strings in one place.

Why centralise prompts?
  • Easy to diff and review prompt changes in version control
  • Swap or tune a prompt without touching service logic

Prompt construction is plain templating over a validated PositionRequest;
job family and series titles are looked up by the caller and passed in so
this module stays free of catalog access.
"""
from __future__ import annotations

from pdgen.domain.models import PositionRequest

# ── System prompt ──────────────────────────────────────────────────────────────
SYSTEM_PROMPT = (
    "You are an experienced HR professional who creates clear, professional "
    "federal position descriptions."
)

# ── Section list requested from the model ──────────────────────────────────────
DESCRIPTION_SECTIONS: tuple[str, ...] = (
    "About the Role",
    "Key Responsibilities (5-7 bullet points)",
    "Required Qualifications",
    "Preferred Qualifications",
    "Benefits and Perks",
)

# ── User message template ──────────────────────────────────────────────────────
USER_TEMPLATE = """\
Create a professional position description for the following federal position:

Job Title: {job_title}
Department: {department}
Pay Scale and Grade: {pay_scale_grade}
Job Family: {job_family}
Series: {series}

Please structure the position description with the following sections:

{sections}

Make it professional, clear, and compelling. Reflect the duties and \
qualification standards typical of the stated occupational series and grade.\
"""


def _code_with_title(code: str, title: str | None) -> str:
    return f"{code} ({title})" if title else code


def build_user_message(
    request: PositionRequest,
    family_title: str | None = None,
    series_title: str | None = None,
) -> str:
    """Assembles the user-turn message for the LLM.

    Args:
        request:      Validated position request.
        family_title: Occupational group title, e.g. "Information Technology".
        series_title: Series title, e.g. "Information Technology Management".

    Returns:
        Formatted user message string.
    """
    sections = "\n".join(
        f"{i}. {name}" for i, name in enumerate(DESCRIPTION_SECTIONS, 1)
    )
    return USER_TEMPLATE.format(
        job_title=request.job_title,
        department=request.department,
        pay_scale_grade=request.pay_scale_grade.value,
        job_family=_code_with_title(request.job_family, family_title),
        series=_code_with_title(request.series, series_title),
        sections=sections,
    )
