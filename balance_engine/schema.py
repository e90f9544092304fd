"""Core data schema for calendar events and balance analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

CATEGORIES = ("sleep", "fitness", "work", "meal", "education", "personal", "other")


@dataclass(frozen=True)
class RawEvent:
    """Calendar entry as returned by a calendar source."""

    id: str
    title: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""
    attendee_count: int = 0
    is_self_created: bool = False


@dataclass
class NormalizedEvent:
    """Raw event enriched with duration, category and time-of-day flags."""

    title: str
    start: datetime
    end: datetime
    duration_hours: float
    category: str
    is_working_hours: bool
    has_attendees: bool


@dataclass(frozen=True)
class Identity:
    """Authenticated calendar owner, supplied by the caller per request."""

    email: str
    access_token: str


@dataclass
class AnalysisResult:
    """Work-life balance report produced by one analysis run."""

    balance_score: Any = None
    sleep_quality: Any = None
    work_life_ratio: Any = None
    top_insight: Any = None
    recommendations: Any = field(default_factory=list)
    time_breakdown: Any = field(default_factory=dict)
    patterns: Any = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict) -> AnalysisResult:
        return cls(
            balance_score=payload.get("balanceScore"),
            sleep_quality=payload.get("sleepQuality"),
            work_life_ratio=payload.get("workLifeRatio"),
            top_insight=payload.get("topInsight"),
            recommendations=payload.get("recommendations", []),
            time_breakdown=payload.get("timeBreakdown", {}),
            patterns=payload.get("patterns", {}),
        )

    def to_dict(self) -> dict:
        """Return the report under the JSON field names clients render."""

        return {
            "balanceScore": self.balance_score,
            "sleepQuality": self.sleep_quality,
            "workLifeRatio": self.work_life_ratio,
            "topInsight": self.top_insight,
            "recommendations": self.recommendations,
            "timeBreakdown": self.time_breakdown,
            "patterns": self.patterns,
        }


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO date-time, an all-day date, or pass a datetime through."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
