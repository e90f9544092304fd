"""Error taxonomy for the analysis pipeline and its collaborators."""

from __future__ import annotations


class BalanceEngineError(Exception):
    """Base class for balance-engine errors."""


class InvalidInput(BalanceEngineError, ValueError):
    """Raw event batch is missing or malformed."""


class UpstreamUnavailable(BalanceEngineError):
    """The model invocation failed or returned nothing."""


class MalformedResponse(BalanceEngineError, ValueError):
    """Model output holds no decodable JSON object."""


class CalendarAuthError(BalanceEngineError):
    """Calendar access token is absent, expired or rejected."""


class ConfigError(BalanceEngineError, ValueError):
    """Invalid runtime configuration."""


class CalendarUnavailable(BalanceEngineError):
    """Calendar API request failed for a reason other than authentication."""
