"""User preferences that affect interaction and animation."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_TWIST_DURATION = 0.2


@dataclass(slots=True)
class Preferences:
    """Seconds per twist, label visibility and click behaviour.

    With ``sector_click_mode`` a left click brings the clicked sector to the
    intersection and a right click sends the intersection to the clicked
    sector.  Otherwise a left click turns the disk counterclockwise and a
    right click turns it clockwise.
    """

    twist_duration: float = DEFAULT_TWIST_DURATION
    show_labels: bool = True
    sector_click_mode: bool = False

    def __post_init__(self) -> None:
        if self.twist_duration < 0:
            raise ValueError(f"twist_duration must be >= 0, got {self.twist_duration}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preferences:
        """Build preferences from stored data; missing keys keep their defaults."""
        defaults = cls()
        return cls(
            twist_duration=float(data.get("twist_duration", defaults.twist_duration)),
            show_labels=bool(data.get("show_labels", defaults.show_labels)),
            sector_click_mode=bool(data.get("sector_click_mode", defaults.sector_click_mode)),
        )
