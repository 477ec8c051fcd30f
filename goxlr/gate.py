"""Microphone noise gate settings as stored in a microphone profile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import _parse_f32, _to_i8, _to_u8

_SECTION = "Noise Gate"


@dataclass
class Gate:
    """Noise gate amount, threshold, timings, state and attenuation."""

    amount: int = 0
    threshold: int = 0
    attack: int = 0
    release: int = 0
    enabled: bool = False
    attenuation: int = 0

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the gate attributes of a DSP element; others are ignored."""
        for name, value in attributes.items():
            if name == "MIC_GATE_MACRO_AMOUNT":
                self.amount = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_GATE_THRESOLD":
                self.threshold = _to_i8(_parse_f32(value, _SECTION))
            elif name == "MIC_GATE_ATTACK":
                self.attack = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_GATE_RELEASE":
                self.release = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_GATE_ENABLE":
                self.enabled = value != "0"
            elif name == "MIC_GATE_ATTEN":
                # Stored as a percentage.
                self.attenuation = _to_u8(_parse_f32(value, _SECTION))

    def to_attributes(self) -> dict[str, str]:
        """The gate attributes as written to a profile."""
        return {
            "MIC_GATE_MACRO_AMOUNT": str(self.amount),
            "MIC_GATE_THRESOLD": str(self.threshold),
            "MIC_GATE_ATTACK": str(self.attack),
            "MIC_GATE_RELEASE": str(self.release),
            "MIC_GATE_ENABLE": "1" if self.enabled else "0",
            "MIC_GATE_ATTEN": str(self.attenuation),
        }