"""Display models built from Slack channel history."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

SUCCESS_MARKER = "success: "
SUCCESS_FLAG = "success"

# Fixed English abbreviations; strftime("%b") follows the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class StatusMessage:
    """A normalized status update."""

    text: str
    timestamp: datetime
    is_success: bool = False

    @property
    def display_timestamp(self) -> str:
        """Render as ``Jan 2, 2006 at 3:04pm (CST)``."""
        hour = self.timestamp.hour % 12 or 12
        meridiem = "am" if self.timestamp.hour < 12 else "pm"
        month = MONTH_ABBREVIATIONS[self.timestamp.month - 1]
        return (
            f"{month} {self.timestamp.day}, {self.timestamp.year} "
            f"at {hour}:{self.timestamp.minute:02d}{meridiem} (CST)"
        )


@dataclass(frozen=True)
class PageModel:
    title: str
    latest: StatusMessage
    history: List[StatusMessage] = field(default_factory=list)
