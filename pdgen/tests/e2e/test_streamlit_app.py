"""
tests/e2e/test_streamlit_app.py
──────────────────────────────────────────────────────────────────────────────
Renders the Streamlit app headlessly with streamlit.testing's AppTest.
"""
from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from pdgen.services.form_state import FormState, WorkflowStep

_APP_PATH = Path(__file__).parents[2] / "interfaces" / "streamlit_app.py"

_MODEL_OUTPUT = (
    "## About the Role\n"
    "Lead **enterprise IT** delivery.\n"
    "<script>alert('x')</script>"
)


def _finalized_app() -> AppTest:
    at = AppTest.from_file(str(_APP_PATH), default_timeout=30)
    at.session_state["form"] = FormState(
        job_title="IT Specialist",
        department="OCIO",
        pay_scale_grade="GS-12",
        job_family="2200",
        series="2210",
        description=_MODEL_OUTPUT,
        step=WorkflowStep.FINALIZE,
    )
    return at.run()


def test_description_rendered_as_markdown_without_html():
    at = _finalized_app()

    assert not at.exception
    rendered = [md for md in at.markdown if md.value == _MODEL_OUTPUT]
    assert len(rendered) == 1
    assert rendered[0].proto.allow_html is False


def test_model_output_never_in_html_markdown():
    at = _finalized_app()

    html_blocks = [md.value for md in at.markdown if md.proto.allow_html]
    assert all("<script>" not in block for block in html_blocks)
