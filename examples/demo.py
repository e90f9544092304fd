"""Demo script for balance-engine using an offline canned model."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from balance_engine.adapters.csv_adapter import parse
from balance_engine.logging_config import configure_logging
from balance_engine.metrics import compute_metrics
from balance_engine.normalizer import normalize_all
from balance_engine.pipeline import run_analysis

CANNED_RESPONSE = """Here is the analysis you asked for:
{
  "balanceScore": 68,
  "sleepQuality": "Fair",
  "workLifeRatio": "55/45",
  "topInsight": "Sleep start times drift late on weekends.",
  "recommendations": [
    "Keep a fixed bedtime on weekends",
    "Protect the evening after client calls",
    "Add a second weekly workout"
  ],
  "timeBreakdown": {"work": 4.8, "sleep": 16.5, "fitness": 1, "personal": 0, "meals": 3},
  "patterns": {"consistentSleep": false, "regularExercise": false, "workOvertime": false, "skipsMeals": false}
}
Let me know if you want more detail."""


def canned_model(prompt: str) -> str:
    print(prompt)
    return CANNED_RESPONSE


def main() -> None:
    configure_logging("INFO")
    events = parse("examples/sample_events.csv")
    analysis = run_analysis(events, canned_model)
    print("Analysis:", json.dumps(analysis.to_dict(), indent=2))
    print("Summary:", compute_metrics(normalize_all(events)))


if __name__ == "__main__":
    main()
