"""Revenue figures for the admin dashboard.

There is no payment ledger in this service yet. Dashboard code depends on the
``RevenueProvider`` interface so a real billing collaborator can be plugged in
through ``get_revenue_provider`` without touching the stats route.
"""

from typing import Protocol


class RevenueProvider(Protocol):
    def total_revenue(self) -> float | None:
        ...


class UnconfiguredRevenueProvider:
    """Reports revenue as unknown until a billing backend exists."""

    def total_revenue(self) -> float | None:
        return None


def get_revenue_provider() -> RevenueProvider:
    return UnconfiguredRevenueProvider()
