"""Domain models for dietary preferences."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthLabel:
    """Represents a dietary or health label from the static catalog."""

    id: int
    label: str
