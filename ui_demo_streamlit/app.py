"""Streamlit report UI for balance-engine."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from googleapiclient.errors import HttpError

from balance_engine.adapters import csv_adapter, google_calendar, json_adapter
from balance_engine.config import load_settings
from balance_engine.errors import BalanceEngineError, CalendarAuthError, CalendarUnavailable, UpstreamUnavailable
from balance_engine.llm import make_model_invoker
from balance_engine.metrics import compute_metrics
from balance_engine.normalizer import normalize_all
from balance_engine.pipeline import run_analysis
from balance_engine.schema import Identity

logger = logging.getLogger(__name__)

PATTERN_LABELS = {
    "consistentSleep": "Consistent sleep",
    "regularExercise": "Regular exercise",
    "workOvertime": "Works overtime",
    "skipsMeals": "Skips meals",
}


def _parse_events_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_events_from_path(temp_path)
    finally:
        os.unlink(temp_path)


def _score_label(score: Any) -> str:
    try:
        value = float(score)
    except (TypeError, ValueError):
        return "n/a"
    if value >= 80:
        return "Great balance"
    if value >= 60:
        return "Good balance"
    return "Needs attention"


def build_report(events: list, invoke_model) -> dict[str, Any]:
    """Run the pipeline and return a UI-friendly payload."""

    analysis = run_analysis(events, invoke_model)
    return {
        "analysis": analysis.to_dict(),
        "score_label": _score_label(analysis.balance_score),
        "summary": compute_metrics(normalize_all(events)),
    }


def error_message(exc: Exception) -> str:
    """Map a failed run to the message shown to the user."""

    if isinstance(exc, CalendarAuthError):
        return "Your Google Calendar session is missing or expired. Please reconnect."
    if isinstance(exc, (CalendarUnavailable, HttpError)):
        return "Failed to fetch calendar data. Please try again later."
    if isinstance(exc, UpstreamUnavailable):
        return "Failed to analyze calendar data. Please try again later."
    if isinstance(exc, (BalanceEngineError, ValueError)):
        return f"Input error: {exc}"
    return "Something went wrong while analyzing your calendar. Please try again."


def main() -> None:
    import streamlit as st

    settings = load_settings()

    st.set_page_config(page_title="Work-Life Balance Report", layout="wide")
    st.title("Work-Life Balance Report")

    with st.sidebar:
        st.header("Calendar source")
        source = st.radio("Source", options=["Demo dataset", "Upload file", "Google Calendar"], index=0)
        uploaded = st.file_uploader("Upload events", type=["csv", "json"]) if source == "Upload file" else None
        if source == "Google Calendar":
            identity = st.session_state.get("identity")
            if identity is not None:
                st.caption(f"Connected as {identity.email}")
                if st.button("Disconnect"):
                    del st.session_state["identity"]
                    st.rerun()
            elif st.button("Connect Google Calendar", disabled=not settings.google_client_secrets_file):
                try:
                    st.session_state["identity"] = google_calendar.connect(settings.google_client_secrets_file)
                except Exception as exc:  # noqa: BLE001
                    logger.exception("Google sign-in failed")
                    st.error(error_message(exc))
                else:
                    st.rerun()
            elif not settings.google_client_secrets_file:
                st.caption("Set GOOGLE_CLIENT_SECRETS_FILE to enable Google sign-in.")
        run = st.button("Analyze my calendar", type="primary")

    if not run:
        st.info("Pick a calendar source in the sidebar and click **Analyze my calendar**.")
        return

    try:
        if source == "Demo dataset":
            events = csv_adapter.parse("examples/sample_events.csv")
        elif source == "Upload file":
            if uploaded is None:
                st.error("Please upload a CSV/JSON file.")
                return
            events = _parse_uploaded(uploaded)
        else:
            identity = st.session_state.get("identity") or Identity(
                email=settings.google_account_email or "",
                access_token=settings.google_access_token or "",
            )
            events = google_calendar.fetch_events(
                identity,
                lookback_days=settings.lookback_days,
                max_results=settings.max_results,
            )

        with st.spinner("Analyzing your calendar..."):
            report = build_report(events, make_model_invoker(settings))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Calendar analysis failed")
        st.error(error_message(exc))
        return

    analysis = report["analysis"]
    st.success(f"Analyzed {len(events)} events.")

    c1, c2, c3 = st.columns(3)
    c1.metric("Balance score", analysis["balanceScore"], report["score_label"])
    c2.metric("Sleep quality", analysis["sleepQuality"])
    c3.metric("Work/life ratio", analysis["workLifeRatio"])

    st.subheader("Top insight")
    st.write(analysis["topInsight"])

    st.subheader("Recommendations")
    for index, recommendation in enumerate(analysis["recommendations"] or [], start=1):
        st.write(f"{index}. {recommendation}")

    st.subheader("Time breakdown (hours)")
    st.bar_chart(analysis["timeBreakdown"] or {})

    st.subheader("Patterns")
    patterns = analysis["patterns"] or {}
    cols = st.columns(len(PATTERN_LABELS))
    for col, (key, label) in zip(cols, PATTERN_LABELS.items()):
        col.metric(label, "Yes" if patterns.get(key) else "No")

    st.subheader("Calendar summary")
    summary = report["summary"]
    s1, s2, s3 = st.columns(3)
    s1.metric("Total hours", f"{summary['total_hours']:.1f}")
    s2.metric("During working hours", f"{summary['working_hours_share'] * 100:.0f}%")
    s3.metric("With attendees", f"{summary['with_attendees_share'] * 100:.0f}%")
    st.table([summary["hours_by_category"]])


if __name__ == "__main__":
    main()
