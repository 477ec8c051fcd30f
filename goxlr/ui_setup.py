"""Editor interface preferences stored alongside a microphone profile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_FIELDS = {
    "eqAdvanced": "eq_advanced",
    "compAdvanced": "comp_advanced",
    "gateAdvanced": "gate_advanced",
    "eqFineTuneEnabled": "eq_fine_tune",
}


@dataclass
class UiSetup:
    """Which advanced editor panels are open; kept so profiles survive a round trip."""

    eq_advanced: bool = False
    comp_advanced: bool = False
    gate_advanced: bool = False
    eq_fine_tune: bool = False

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the attributes of a UI element; only "1" counts as enabled."""
        for name, value in attributes.items():
            if name in _FIELDS:
                setattr(self, _FIELDS[name], value == "1")

    def to_attributes(self) -> dict[str, str]:
        """The UI attributes as written to a profile."""
        return {name: "1" if getattr(self, attr) else "0" for name, attr in _FIELDS.items()}