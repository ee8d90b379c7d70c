from __future__ import annotations


class HomeownerMatchError(Exception):
    """Base class for errors raised by the matching engine."""


class HomeownerLookupError(HomeownerMatchError):
    """The candidate list could not be obtained.

    Raised instead of returning "no match" so callers can tell a lookup
    failure apart from an inconclusive match. The underlying exception is
    chained as ``__cause__``.
    """
