"""Ten-band microphone equalizer settings as stored in a microphone profile."""

from __future__ import annotations

import math
import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from .errors import _parse_f32, _to_i8
from .types import EqFrequencies

_SECTION = "Equalizer"

_LABELS = {
    EqFrequencies.Equalizer31Hz: "31.5HZ",
    EqFrequencies.Equalizer63Hz: "63HZ",
    EqFrequencies.Equalizer125Hz: "125HZ",
    EqFrequencies.Equalizer250Hz: "250HZ",
    EqFrequencies.Equalizer500Hz: "500HZ",
    EqFrequencies.Equalizer1KHz: "1KHZ",
    EqFrequencies.Equalizer2KHz: "2KHZ",
    EqFrequencies.Equalizer4KHz: "4KHZ",
    EqFrequencies.Equalizer8KHz: "8KHZ",
    EqFrequencies.Equalizer16KHz: "16KHZ",
}

_DEFAULT_FREQUENCIES = {
    EqFrequencies.Equalizer31Hz: 31.5,
    EqFrequencies.Equalizer63Hz: 63.0,
    EqFrequencies.Equalizer125Hz: 125.0,
    EqFrequencies.Equalizer250Hz: 250.0,
    EqFrequencies.Equalizer500Hz: 500.0,
    EqFrequencies.Equalizer1KHz: 1000.0,
    EqFrequencies.Equalizer2KHz: 2000.0,
    EqFrequencies.Equalizer4KHz: 4000.0,
    EqFrequencies.Equalizer8KHz: 8000.0,
    EqFrequencies.Equalizer16KHz: 16000.0,
}

_GAIN_NAMES = {f"MIC_EQ_{label}_GAIN": band for band, label in _LABELS.items()}
_FREQ_NAMES = {f"MIC_EQ_{label}_F": band for band, label in _LABELS.items()}

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _to_f32(value: float) -> float:
    """Round a float to single precision, overflowing to infinity."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_f32(value: float) -> str:
    """Shortest plain decimal text that reads back as the same single-precision value."""
    number = _to_f32(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = repr(number)
    for precision in range(1, 18):
        candidate = f"{number:.{precision}g}"
        if _to_f32(float(candidate)) == number:
            text = candidate
            break
    return format(Decimal(text), "f")


def goxlr_frequency(frequency: float) -> int:
    """The device's encoding of a frequency: 24 * log2(frequency / 20), rounded."""
    ratio = _to_f32(_to_f32(frequency) / 20.0)
    if math.isnan(ratio) or ratio < 0:
        return 0
    if ratio == 0:
        return _I32_MIN
    if math.isinf(ratio):
        return _I32_MAX
    scaled = _to_f32(24.0 * _to_f32(math.log2(ratio)))
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return int(max(_I32_MIN, min(_I32_MAX, rounded)))


@dataclass
class Equalizer:
    """Gain and centre frequency of each of the ten equalizer bands."""

    gains: dict[EqFrequencies, int] = field(
        default_factory=lambda: {band: 0 for band in EqFrequencies}
    )
    frequencies: dict[EqFrequencies, float] = field(
        default_factory=lambda: dict(_DEFAULT_FREQUENCIES)
    )

    def parse_attributes(self, attributes: Mapping[str, str]) -> None:
        """Update from the equalizer attributes of a DSP element; others are ignored."""
        for name, value in attributes.items():
            if name in _GAIN_NAMES:
                self.gains[_GAIN_NAMES[name]] = _to_i8(_parse_f32(value, _SECTION))
            elif name in _FREQ_NAMES:
                self.frequencies[_FREQ_NAMES[name]] = _parse_f32(value, _SECTION)

    def to_attributes(self) -> dict[str, str]:
        """The equalizer attributes as written to a profile."""
        attributes = {
            f"MIC_EQ_{label}_GAIN": str(self.gains[band]) for band, label in _LABELS.items()
        }
        attributes.update(
            {
                f"MIC_EQ_{label}_F": _format_f32(self.frequencies[band])
                for band, label in _LABELS.items()
            }
        )
        return attributes

    def frequency_as_goxlr(self, band: EqFrequencies) -> int:
        """The frequency of ``band`` in the device's encoding."""
        return goxlr_frequency(self.frequencies[band])