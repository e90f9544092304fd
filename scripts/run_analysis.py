"""Run a work-life balance analysis from a CSV/JSON file or Google Calendar."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from balance_engine.adapters import csv_adapter, google_calendar, json_adapter
from balance_engine.config import load_settings
from balance_engine.errors import BalanceEngineError
from balance_engine.llm import make_model_invoker
from balance_engine.logging_config import configure_logging
from balance_engine.metrics import compute_metrics
from balance_engine.normalizer import normalize_all
from balance_engine.pipeline import run_analysis
from balance_engine.schema import Identity

logger = logging.getLogger("balance_engine.scripts.run_analysis")


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _resolve_identity(args, settings) -> Identity:
    if args.connect:
        client_secrets = args.client_secrets or settings.google_client_secrets_file
        if not client_secrets:
            raise ValueError("--connect needs --client-secrets or GOOGLE_CLIENT_SECRETS_FILE")
        return google_calendar.connect(client_secrets)
    return Identity(
        email=args.email or settings.google_account_email or "",
        access_token=args.access_token or settings.google_access_token or "",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze calendar work-life balance")
    parser.add_argument("--data", help="Path to CSV/JSON events file (skips Google Calendar)")
    parser.add_argument("--connect", action="store_true", help="Sign in to Google in the browser before fetching")
    parser.add_argument("--client-secrets", help="OAuth client secrets JSON (default: GOOGLE_CLIENT_SECRETS_FILE)")
    parser.add_argument("--access-token", help="Google OAuth access token (default: GOOGLE_ACCESS_TOKEN)")
    parser.add_argument("--email", help="Calendar owner email (default: GOOGLE_ACCOUNT_EMAIL)")
    parser.add_argument("--env-file", help="Optional .env file")
    parser.add_argument("--output", default="outputs/analysis_report.json", help="Report output path")
    args = parser.parse_args(argv)

    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    try:
        if args.data:
            events = _load_events(Path(args.data))
        else:
            events = google_calendar.fetch_events(
                _resolve_identity(args, settings),
                lookback_days=settings.lookback_days,
                max_results=settings.max_results,
            )

        analysis = run_analysis(events, make_model_invoker(settings))
    except (BalanceEngineError, ValueError) as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    report = {
        "analysis": analysis.to_dict(),
        "summary": compute_metrics(normalize_all(events)),
    }
    print(json.dumps(report, indent=2))

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved analysis report to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
