"""Component categories known to the backend.

Kept in the domain layer so the CLI and the schemas share a single source of
truth without importing adapters.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Hardware category of a component."""

    CPU = "cpu"
    MOTHERBOARD = "motherboard"
    MEMORY = "memory"
    STORAGE = "storage"
    GPU = "gpu"
    POWER_SUPPLY = "powersupply"
    CASE = "case"
    COOLER = "cooler"
    MONITOR = "monitor"
    EXPANSION_CARD = "expansioncard"
    PERIPHERALS = "peripherals"
    OTHER = "other"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True when `value` names a known category."""

        return value in cls._value2member_map_

    def label(self) -> str:
        """Human readable label for tables and prompts."""

        labels = {
            Category.CPU: "CPU",
            Category.GPU: "GPU",
            Category.POWER_SUPPLY: "Power supply",
            Category.EXPANSION_CARD: "Expansion card",
        }
        return labels.get(self, self.value.capitalize())
