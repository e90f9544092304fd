"""End-to-end calendar analysis pipeline."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Callable

from balance_engine.errors import InvalidInput
from balance_engine.normalizer import normalize_all
from balance_engine.parser import parse_response
from balance_engine.prompt import build_prompt
from balance_engine.schema import AnalysisResult, RawEvent

logger = logging.getLogger(__name__)

ModelInvoker = Callable[[str], str]


def _validate_batch(raw_events) -> list[RawEvent]:
    if raw_events is None:
        raise InvalidInput("No calendar data provided")
    if isinstance(raw_events, (str, bytes, Mapping)):
        raise InvalidInput(f"Calendar data must be a sequence of events, got {type(raw_events).__name__}")

    try:
        events = list(raw_events)
    except TypeError as exc:
        raise InvalidInput("Calendar data must be a sequence of events") from exc

    for index, event in enumerate(events, start=1):
        if not isinstance(event, RawEvent):
            raise InvalidInput(f"Item {index}: expected RawEvent, got {type(event).__name__}")
    return events


def run_analysis(raw_events: list[RawEvent], invoke_model: ModelInvoker) -> AnalysisResult:
    """Normalize events, query the model once and parse its analysis.

    Errors raised by ``invoke_model`` propagate unchanged; malformed model
    output degrades to the default report.
    """

    events = _validate_batch(raw_events)
    normalized = normalize_all(events)
    prompt = build_prompt(normalized)

    started = time.perf_counter()
    response_text = invoke_model(prompt)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    logger.info("Model analysis for %d events completed in %.0f ms", len(normalized), elapsed_ms)

    return parse_response(response_text)
