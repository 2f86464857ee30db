"""Journal entry domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class JournalEntry:
    """
    User-authored note attached to a ticker.

    Content is an opaque rich-text (HTML) or plain-text blob. Entries play
    no part in position or P/L calculation.
    """

    entry_id: str
    user_id: str
    ticker: str
    content: str
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        self.ticker = self.ticker.strip().upper()
