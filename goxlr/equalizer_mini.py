"""Six-band equalizer settings used by the Mini, as stored in a microphone profile."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .equalizer import _format_f32
from .errors import _parse_f32, _to_i8
from .types import MiniEqFrequencies

_SECTION = "Mini Equalizer"

_LABELS = {
    MiniEqFrequencies.Equalizer90Hz: "90HZ",
    MiniEqFrequencies.Equalizer250Hz: "250HZ",
    MiniEqFrequencies.Equalizer500Hz: "500HZ",
    MiniEqFrequencies.Equalizer1KHz: "1KHZ",
    MiniEqFrequencies.Equalizer3KHz: "3KHZ",
    MiniEqFrequencies.Equalizer8KHz: "8KHZ",
}

# The Mini's bands do not sit at the frequencies their names suggest.
_DEFAULT_FREQUENCIES = {
    MiniEqFrequencies.Equalizer90Hz: 90.0,
    MiniEqFrequencies.Equalizer250Hz: 160.0,
    MiniEqFrequencies.Equalizer500Hz: 480.0,
    MiniEqFrequencies.Equalizer1KHz: 1500.0,
    MiniEqFrequencies.Equalizer3KHz: 4500.0,
    MiniEqFrequencies.Equalizer8KHz: 7800.0,
}

_GAIN_NAMES = {f"MIC_MINI_EQ_{label}_GAIN": band for band, label in _LABELS.items()}
_FREQ_NAMES = {f"MIC_MINI_EQ_{label}_F": band for band, label in _LABELS.items()}


@dataclass
class EqualizerMini:
    """Gain and centre frequency of each of the Mini's six equalizer bands."""

    gains: dict[MiniEqFrequencies, int] = field(
        default_factory=lambda: {band: 0 for band in MiniEqFrequencies}
    )
    frequencies: dict[MiniEqFrequencies, float] = field(
        default_factory=lambda: dict(_DEFAULT_FREQUENCIES)
    )

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the Mini equalizer attributes of a DSP element; others are ignored."""
        for name, value in attributes.items():
            if name in _GAIN_NAMES:
                self.gains[_GAIN_NAMES[name]] = _to_i8(_parse_f32(value, _SECTION))
            elif name in _FREQ_NAMES:
                self.frequencies[_FREQ_NAMES[name]] = _parse_f32(value, _SECTION)

    def to_attributes(self) -> dict[str, str]:
        """The Mini equalizer attributes as written to a profile."""
        attributes = {
            f"MIC_MINI_EQ_{label}_GAIN": str(self.gains[band])
            for band, label in _LABELS.items()
        }
        attributes.update(
            {
                f"MIC_MINI_EQ_{label}_F": _format_f32(self.frequencies[band])
                for band, label in _LABELS.items()
            }
        )
        return attributes