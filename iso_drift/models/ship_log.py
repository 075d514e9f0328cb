"""Ship's log — the short, newest-first list of outcome messages shown to the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import LOG_LINES


@dataclass
class ShipLog:
    """Bounded message log. Index 0 is the most recent line."""

    capacity: int = LOG_LINES
    lines: list[str] = field(default_factory=list)

    def add(self, text: str) -> None:
        self.lines.insert(0, text)
        del self.lines[self.capacity:]

    def extend(self, texts: list[str]) -> None:
        """Add several messages in the order they happened."""
        for text in texts:
            self.add(text)

    def clear(self) -> None:
        self.lines.clear()
