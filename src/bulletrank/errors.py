"""Exception hierarchy for bulletrank."""

from __future__ import annotations


class BulletRankError(Exception):
    """Base class for all bulletrank errors."""


class MalformedRecordError(BulletRankError, ValueError):
    """A record lacks a usable ``relevance_score``."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        if index is not None:
            message = f"record #{index}: {message}"
        super().__init__(message)


class InvalidParameterError(BulletRankError, ValueError):
    """A selection parameter (``top_k``, ``min_score``) has the wrong type."""


class MalformedPayloadError(BulletRankError, ValueError):
    """A resume payload has no ``data.bullets`` list."""


class ConfigurationError(BulletRankError):
    """A required setting is missing."""


class WebhookError(BulletRankError):
    """The upstream webhook failed or returned something unusable."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
