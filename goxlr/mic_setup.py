"""Microphone type and per-input gain as stored in a microphone profile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import _parse_uint

_SECTION = "Microphone Setup"

# Gains are stored in profiles as dB * 65536.
_GAIN_SCALE = 65536

_GAIN_FIELDS = {
    "DYNAMIC_MIC_GAIN": "dynamic_mic_gain",
    "CONDENSER_MIC_GAIN": "condenser_mic_gain",
    "TRS_MIC_GAIN": "trs_mic_gain",
}


@dataclass
class MicSetup:
    """The selected microphone type and the gain of each microphone input, in dB."""

    mic_type: int = 0
    dynamic_mic_gain: int = 0
    condenser_mic_gain: int = 0
    trs_mic_gain: int = 0

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the attributes of a setup element; others are ignored."""
        for name, value in attributes.items():
            if name == "MIC_TYPE":
                self.mic_type = _parse_uint(value, 8, _SECTION)
            elif name in _GAIN_FIELDS:
                gain = _parse_uint(value, 32, _SECTION) // _GAIN_SCALE
                setattr(self, _GAIN_FIELDS[name], gain)

    def to_attributes(self) -> dict[str, str]:
        """The setup attributes as written to a profile."""
        attributes = {"MIC_TYPE": str(self.mic_type)}
        for name, attr in _GAIN_FIELDS.items():
            attributes[name] = str(getattr(self, attr) * _GAIN_SCALE)
        return attributes