"""View models for service outputs."""

from tradejournal.domain.views.portfolio import (
    CENT,
    PositionView,
    Quote,
    RealizedPnlItem,
    RealizedPnlView,
    PerformanceView,
    JournalPage,
)

__all__ = [
    "CENT",
    "PositionView",
    "Quote",
    "RealizedPnlItem",
    "RealizedPnlView",
    "PerformanceView",
    "JournalPage",
]
