"""Analysis prompt construction."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from balance_engine.schema import NormalizedEvent

_TEMPLATE = """
You are a work-life balance expert. Analyze the following calendar data and provide insights about the person's work-life balance.

Calendar Events (last 30 days):
{event_summary}

Please analyze this data and provide a JSON response with the following structure:
{{
  "balanceScore": <number 0-100>,
  "sleepQuality": "<Excellent/Good/Fair/Poor>",
  "workLifeRatio": "<work%/life%>",
  "topInsight": "<key insight about their schedule>",
  "recommendations": [
    "<recommendation 1>",
    "<recommendation 2>",
    "<recommendation 3>"
  ],
  "timeBreakdown": {{
    "work": <hours>,
    "sleep": <hours>,
    "fitness": <hours>,
    "personal": <hours>,
    "meals": <hours>
  }},
  "patterns": {{
    "consistentSleep": <boolean>,
    "regularExercise": <boolean>,
    "workOvertime": <boolean>,
    "skipsMeals": <boolean>
  }}
}}

Focus on:
1. Sleep consistency and quality
2. Work-life boundaries
3. Time allocation across categories
4. Health and wellness habits
5. Areas for improvement

Provide actionable, personalized recommendations based on the specific patterns you observe.
"""


def format_hours(hours: float) -> str:
    """One decimal place, exact halves rounded away from zero."""

    return str(Decimal(hours).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_event_line(event: NormalizedEvent) -> str:
    return f"{event.title} ({event.category}) - {format_hours(event.duration_hours)}h on {event.start.isoformat()}"


def build_prompt(events: list[NormalizedEvent]) -> str:
    """Render normalized events into the fixed analysis request."""

    event_summary = "\n".join(format_event_line(event) for event in events)
    return _TEMPLATE.format(event_summary=event_summary)
