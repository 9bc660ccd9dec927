from enum import Enum


class RateType(Enum):
    """Classifies the kind of exchange rates a provider supports."""

    ANY = "ANY"
    """Matches any kind of rate; used in queries."""

    DEFERRED = "DEFERRED"
    """Rates delayed by some time (e.g. end-of-day reference rates)."""

    HISTORIC = "HISTORIC"
    """Rates of a past point in time."""

    OTHER = "OTHER"
    """Rates that fit none of the other categories."""

    REALTIME = "REALTIME"
    """Current rates with no significant delay."""
