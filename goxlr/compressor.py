"""Microphone compressor settings as stored in a microphone profile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import _parse_f32, _to_i8, _to_u8

_SECTION = "Compressor"


@dataclass
class Compressor:
    """Compressor threshold, ratio, attack, release and make-up gain."""

    threshold: int = 0
    ratio: int = 0
    attack: int = 0
    release: int = 0
    makeup_gain: int = 0

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the compressor attributes of a DSP element; others are ignored."""
        for name, value in attributes.items():
            if name == "MIC_COMP_THRESHOLD":
                self.threshold = _to_i8(_parse_f32(value, _SECTION))
            elif name == "MIC_COMP_RATIO":
                self.ratio = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_COMP_ATTACK":
                self.attack = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_COMP_RELEASE":
                self.release = _to_u8(_parse_f32(value, _SECTION))
            elif name == "MIC_COMP_MAKEUPGAIN":
                self.makeup_gain = _to_u8(_parse_f32(value, _SECTION))

    def to_attributes(self) -> dict[str, str]:
        """The compressor attributes as written to a profile."""
        return {
            "MIC_COMP_THRESHOLD": str(self.threshold),
            "MIC_COMP_RATIO": str(self.ratio),
            "MIC_COMP_ATTACK": str(self.attack),
            "MIC_COMP_RELEASE": str(self.release),
            "MIC_COMP_MAKEUPGAIN": str(self.makeup_gain),
        }