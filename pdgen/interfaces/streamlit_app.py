"""
interfaces/streamlit_app.py
──────────────────────────────────────────────────────────────────────────────
Streamlit UI for the position description generator.

Run:
  streamlit run pdgen/interfaces/streamlit_app.py

Features:
  • Step indicator: Define → Generate → Finalize
  • Position form: title, department, pay grade, job family, dependent series
    (changing the job family always clears the series)
  • Inline field errors from client-side validation before any generation
  • Generation re-validates server-side (DescriptionGenerator) before the LLM
  • Download of the generated description
  • OPM catalog browser with CSV download
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# ── Path setup ─────────────────────────────────────────────────────────────
# Allow running from the repo root with: streamlit run pdgen/interfaces/streamlit_app.py
_REPO_ROOT = Path(__file__).parent.parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from pdgen.config.log import configure_logging
from pdgen.config.settings import get_settings
from pdgen.domain.exceptions import PDGenError
from pdgen.domain.models import PayScaleGrade
from pdgen.services.catalog import TaxonomyCatalog, get_catalog
from pdgen.services.container import get_generator
from pdgen.services.form_state import FormState, WorkflowStep

logger = logging.getLogger(__name__)

# ── Page configuration ─────────────────────────────────────────────────────
st.set_page_config(
    page_title="HR Position Description Generator",
    page_icon="📄",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── CSS ────────────────────────────────────────────────────────────────────
st.markdown(
    """
    <style>
    [data-testid="stSidebar"] { background: #232f3e; }
    [data-testid="stSidebar"] * { color: #f5f5f5 !important; }
    .stApp { background-color: #f5f5f5; }

    .step { display: inline-block; text-align: center; width: 110px; }
    .step .dot {
        width: 40px; height: 40px; line-height: 40px; border-radius: 50%;
        margin: 0 auto; color: white; font-weight: 600; background: #d1d1d1;
    }
    .step.active .dot, .step.done .dot { background: #ff9900; }
    .step .name { font-size: 0.9em; color: #333; margin-top: 4px; }

    .field-error { color: #b91c1c; font-size: 0.82em; margin-top: -8px; }
    </style>
    """,
    unsafe_allow_html=True,
)

# Widget keys, one per form field
_WIDGET_KEYS = {
    "job_title": "w_job_title",
    "department": "w_department",
    "pay_scale_grade": "w_pay_scale_grade",
    "job_family": "w_job_family",
    "series": "w_series",
}


# ── Backend singletons ─────────────────────────────────────────────────────

@st.cache_resource(show_spinner="Loading OPM taxonomy…")
def _load_catalog() -> TaxonomyCatalog:
    configure_logging(get_settings().log_level)
    return get_catalog()


@st.cache_resource(show_spinner="Connecting to the generation service…")
def _load_generator():
    return get_generator()


# ── Session state ──────────────────────────────────────────────────────────

def _form() -> FormState:
    if "form" not in st.session_state:
        st.session_state["form"] = FormState()
    return st.session_state["form"]


def _on_field_change(name: str) -> None:
    _form().set_field(name, st.session_state[_WIDGET_KEYS[name]])


def _on_family_change() -> None:
    _form().set_job_family(st.session_state[_WIDGET_KEYS["job_family"]])
    st.session_state[_WIDGET_KEYS["series"]] = ""


def _on_reset() -> None:
    _form().reset()
    for key in _WIDGET_KEYS.values():
        st.session_state[key] = ""


# ── Rendering helpers ──────────────────────────────────────────────────────

def _render_steps(current: WorkflowStep) -> None:
    parts = []
    for step in WorkflowStep:
        state = "active" if step == current else "done" if step < current else ""
        parts.append(
            f'<div class="step {state}"><div class="dot">{step.value}</div>'
            f'<div class="name">{step.label}</div></div>'
        )
    st.markdown("".join(parts), unsafe_allow_html=True)


def _field_error(form: FormState, wire_name: str) -> None:
    message = form.errors.get(wire_name)
    if message:
        st.markdown(f'<div class="field-error">{message}</div>', unsafe_allow_html=True)


def _render_form(form: FormState, catalog: TaxonomyCatalog) -> bool:
    """Render the position form; returns True when Generate was pressed."""
    st.markdown("### Position Details")

    st.text_input(
        "Job Title",
        key=_WIDGET_KEYS["job_title"],
        placeholder="Senior Software Engineer",
        on_change=_on_field_change,
        args=("job_title",),
    )
    _field_error(form, "jobTitle")

    st.text_input(
        "Department",
        key=_WIDGET_KEYS["department"],
        placeholder="Engineering",
        on_change=_on_field_change,
        args=("department",),
    )
    _field_error(form, "department")

    st.selectbox(
        "Pay Scale & Grade",
        [""] + PayScaleGrade.values(),
        key=_WIDGET_KEYS["pay_scale_grade"],
        format_func=lambda v: v or "Select a pay scale and grade",
        on_change=_on_field_change,
        args=("pay_scale_grade",),
    )
    _field_error(form, "payScaleGrade")

    groups = {g.code: g for g in catalog.list_occupational_groups()}
    st.selectbox(
        "Job Family",
        [""] + list(groups),
        key=_WIDGET_KEYS["job_family"],
        format_func=lambda c: groups[c].label if c else "Select a job family",
        on_change=_on_family_change,
    )
    _field_error(form, "jobFamily")

    series = {s.code: s for s in form.series_options(catalog)}
    st.selectbox(
        "Series",
        [""] + list(series),
        key=_WIDGET_KEYS["series"],
        format_func=lambda c: series[c].label if c in series else "Select a series",
        disabled=not series,
        on_change=_on_field_change,
        args=("series",),
    )
    _field_error(form, "series")

    return st.button("Generate Description", type="primary")


def _generate(form: FormState, catalog: TaxonomyCatalog) -> None:
    """Client-side validate, then generate (the generator re-validates)."""
    if form.submit(catalog) is None:
        st.warning("Please correct the highlighted fields.")
        return

    try:
        generator = _load_generator()
        with st.spinner("Generating…"):
            validation, result = generator.generate_from_candidate(form.as_candidate())
    except PDGenError as exc:
        logger.exception("Generation failed")
        form.record_failure()
        st.error(f"Error generating description: {exc}")
        return
    except Exception:
        logger.exception("Generation failed: unexpected error")
        form.record_failure()
        st.error("Failed to generate job description. Please try again.")
        return

    if result is None:
        form.errors = dict(validation.errors)
        form.record_failure()
        st.warning("The server rejected the submission; please review the fields.")
        return

    form.record_description(result.text)
    st.rerun()


def _render_result(form: FormState) -> None:
    st.markdown("### Generated Position Description")
    with st.container(border=True):
        st.markdown(form.description)

    c1, c2 = st.columns(2)
    slug = form.job_title.strip().replace(" ", "_")[:40] or "position"
    c1.download_button(
        "⬇ Download .txt",
        form.description.encode("utf-8"),
        file_name=f"{slug}_description.txt",
        mime="text/plain",
    )
    c2.button("Start over", on_click=_on_reset)


def _render_catalog(catalog: TaxonomyCatalog) -> None:
    rows = [
        {
            "Job Family": g.code,
            "Family Title": g.title,
            "Series": s.code,
            "Series Title": s.title,
        }
        for g in catalog.list_occupational_groups()
        for s in catalog.list_series_for_group(g.code)
    ]
    df = pd.DataFrame(rows)
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "⬇ Download CSV",
        df.to_csv(index=False).encode(),
        file_name="opm_series.csv",
        mime="text/csv",
    )


# ── Main ───────────────────────────────────────────────────────────────────

def main() -> None:
    st.title("📄 HR Position Description Generator")
    st.caption("Federal position descriptions from OPM job family, series and grade.")

    catalog = _load_catalog()
    form = _form()

    with st.sidebar:
        st.markdown("## Settings")
        st.markdown(f"Provider: **{get_settings().llm_provider}**")
        st.markdown(
            f"Taxonomy: **{len(catalog.list_occupational_groups())}** families · "
            f"**{len(catalog)}** series"
        )

    tab_generate, tab_catalog = st.tabs(["📝 Generate PD", "📚 OPM Catalog"])

    with tab_generate:
        _render_steps(form.step)
        st.markdown("---")
        if form.step == WorkflowStep.FINALIZE:
            _render_result(form)
        elif _render_form(form, catalog):
            _generate(form, catalog)

    with tab_catalog:
        _render_catalog(catalog)


if __name__ == "__main__":
    main()
