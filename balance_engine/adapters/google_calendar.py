"""Google Calendar adapter for raw events."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from balance_engine.errors import CalendarAuthError, CalendarUnavailable
from balance_engine.schema import Identity, RawEvent, parse_timestamp

logger = logging.getLogger(__name__)

_AUTH_STATUSES = {401, 403}

DEFAULT_SCOPES = [
    "openid",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/calendar.readonly",
]


def build_service(identity: Identity) -> Any:
    creds = Credentials(token=identity.access_token)
    return build("calendar", "v3", credentials=creds, cache_discovery=False)


def connect(client_secrets_path: str, scopes: Optional[list[str]] = None, port: int = 0) -> Identity:
    """Run the browser consent flow and return the connected account's identity.

    The email comes from the OAuth2 userinfo endpoint, not from user input.
    """

    flow = InstalledAppFlow.from_client_secrets_file(client_secrets_path, scopes or DEFAULT_SCOPES)
    creds = flow.run_local_server(port=port, access_type="offline", prompt="consent")

    try:
        userinfo = build("oauth2", "v2", credentials=creds, cache_discovery=False).userinfo().get().execute()
    except HttpError as exc:
        raise CalendarAuthError("Could not read the connected account's email") from exc

    email = userinfo.get("email")
    if not email or not creds.token:
        raise CalendarAuthError("Google sign-in did not return an email and access token")

    logger.info("Connected Google account %s", email)
    return Identity(email=email, access_token=creds.token)


def _event_time(item: dict, key: str) -> Optional[str]:
    data = item.get(key) or {}
    return data.get("dateTime") or data.get("date")


def _to_raw_event(item: dict, identity: Identity) -> Optional[RawEvent]:
    start = _event_time(item, "start")
    end = _event_time(item, "end")
    if start is None or end is None:
        logger.debug("Skipping event %s without start/end", item.get("id"))
        return None

    creator = item.get("creator") or {}
    return RawEvent(
        id=item.get("id", ""),
        title=item.get("summary") or "Untitled",
        start=parse_timestamp(start),
        end=parse_timestamp(end),
        description=item.get("description") or "",
        location=item.get("location") or "",
        attendee_count=len(item.get("attendees") or []),
        is_self_created=bool(identity.email) and creator.get("email") == identity.email,
    )


def fetch_events(
    identity: Optional[Identity],
    *,
    service: Any = None,
    now: Optional[datetime] = None,
    lookback_days: int = 30,
    max_results: int = 100,
) -> list[RawEvent]:
    """Fetch single events from the primary calendar, oldest first."""

    if identity is None or not identity.access_token:
        raise CalendarAuthError("Not authenticated")

    if service is None:
        service = build_service(identity)

    now = now or datetime.now(timezone.utc)
    time_min = now - timedelta(days=lookback_days)

    try:
        resp = (
            service.events()
            .list(
                calendarId="primary",
                timeMin=time_min.isoformat(),
                timeMax=now.isoformat(),
                maxResults=max_results,
                singleEvents=True,
                orderBy="startTime",
            )
            .execute()
        )
    except HttpError as exc:
        if exc.resp.status in _AUTH_STATUSES:
            raise CalendarAuthError("Calendar access token rejected") from exc
        logger.error("Calendar fetch failed with status %s", exc.resp.status)
        raise CalendarUnavailable("Failed to fetch calendar data") from exc
    except RefreshError as exc:
        raise CalendarAuthError("Calendar access token expired") from exc
    except (TransportError, httplib2.HttpLib2Error, OSError) as exc:
        logger.error("Calendar fetch failed: %s", exc)
        raise CalendarUnavailable("Failed to fetch calendar data") from exc

    items = resp.get("items", [])
    events = [event for event in (_to_raw_event(item, identity) for item in items) if event is not None]
    logger.info("Fetched %d calendar events for the last %d days", len(events), lookback_days)
    return events
