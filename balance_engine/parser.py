"""Model response parsing with a fixed fallback report."""

from __future__ import annotations

import copy
import json
import logging
import re

from balance_engine.errors import MalformedResponse
from balance_engine.logging_config import log_fallback
from balance_engine.schema import AnalysisResult

logger = logging.getLogger(__name__)

# Greedy: spans from the first "{" to the last "}" in the text.
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

_DEFAULT_ANALYSIS = {
    "balanceScore": 75,
    "sleepQuality": "Good",
    "workLifeRatio": "60/40",
    "topInsight": "Your calendar shows a generally balanced lifestyle with room for optimization.",
    "recommendations": [
        "Consider blocking time for focused work sessions",
        "Maintain consistent sleep schedule",
        "Schedule regular breaks between meetings",
    ],
    "timeBreakdown": {
        "work": 40,
        "sleep": 56,
        "fitness": 10,
        "personal": 20,
        "meals": 7,
    },
    "patterns": {
        "consistentSleep": True,
        "regularExercise": True,
        "workOvertime": False,
        "skipsMeals": False,
    },
}


def default_analysis() -> AnalysisResult:
    """Return a fresh copy of the fallback report."""

    return AnalysisResult.from_dict(copy.deepcopy(_DEFAULT_ANALYSIS))


def extract_json_object(text: str) -> dict:
    """Decode the brace-delimited JSON object embedded in ``text``."""

    if not isinstance(text, str):
        raise MalformedResponse(f"Expected model output text, got {type(text).__name__}")

    match = _JSON_OBJECT.search(text)
    if match is None:
        raise MalformedResponse("No JSON object found in model output")

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Invalid JSON in model output: {exc.msg}") from exc

    if not isinstance(payload, dict):
        raise MalformedResponse("Model output JSON is not an object")
    return payload


def parse_response(text: str) -> AnalysisResult:
    """Parse model output into a report, returning the fallback on failure."""

    try:
        payload = extract_json_object(text)
    except MalformedResponse as exc:
        log_fallback(logger, "response_parser", reason=str(exc))
        return default_analysis()
    return AnalysisResult.from_dict(payload)
