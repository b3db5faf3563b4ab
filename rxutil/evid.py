"""Classification of event identifiers (EVID) into doses and observations."""

from __future__ import annotations

__all__ = ["is_dose", "is_obs"]


def is_dose(evid: int) -> bool:
    """Return True when ``evid`` marks a dosing event."""
    return evid == 3 or evid >= 100


def is_obs(evid: int) -> bool:
    """Return True when ``evid`` marks an observation record."""
    return evid in (0, 2) or 9 <= evid <= 99