"""Microphone profiles: EQ, compressor, gate, de-esser and microphone setup."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import BinaryIO, Union

from .compressor import Compressor
from .equalizer import Equalizer
from .equalizer_mini import EqualizerMini
from .errors import SaveError, _parse_f32, _to_u8
from .gate import Gate
from .mic_setup import MicSetup
from .ui_setup import UiSetup

_log = logging.getLogger(__name__)

_ROOT = "MicProfileTree"
_DSP = "dspTreeMicProfile"
_SETUP = "setupTreeMicProfile"
_UI = "micProfileUIMicProfile"
_DEESS = "MIC_DEESS_AMOUNT"

Source = Union[bytes, bytearray, memoryview, str, "os.PathLike[str]", BinaryIO]


def _local(name: str) -> str:
    return name.rpartition("}")[2]


def _read_source(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "read"):
        data = source.read()
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)
    with open(source, "rb") as handle:
        return handle.read()


def _start_elements(data: bytes) -> Iterator[ET.Element]:
    """Elements in document order; stops quietly at the first XML error."""
    parser = ET.XMLPullParser(events=("start",))
    parser.feed(data)
    failure = None
    try:
        parser.close()
    except ET.ParseError as exc:
        failure = exc
    try:
        for _event, element in parser.read_events():
            yield element
    except ET.ParseError as exc:
        _log.warning("Error: %s", exc)
        return
    if failure is not None:
        _log.warning("Error: %s", failure)


@dataclass
class MicProfileSettings:
    """Everything a microphone profile file holds."""

    equalizer: Equalizer = field(default_factory=Equalizer)
    equalizer_mini: EqualizerMini = field(default_factory=EqualizerMini)
    compressor: Compressor = field(default_factory=Compressor)
    gate: Gate = field(default_factory=Gate)
    deess: int = 0
    mic_setup: MicSetup = field(default_factory=MicSetup)
    ui_setup: UiSetup = field(default_factory=UiSetup)

    @classmethod
    def load(cls, source: Source) -> MicProfileSettings:
        """Read a profile from XML bytes, a binary file object or a file path.

        Malformed XML ends reading early; what was read up to then is kept.
        Bad attribute values raise :class:`ParseError`.
        """
        settings = cls()
        for element in _start_elements(_read_source(source)):
            tag = _local(element.tag)
            attributes = {_local(name): value for name, value in element.attrib.items()}
            if tag == _DSP:
                # One large element carries the EQs, compressor, gate and de-esser.
                settings.equalizer.parse_attributes(attributes)
                settings.equalizer_mini.parse_attributes(attributes)
                settings.compressor.parse_attributes(attributes)
                settings.gate.parse_attributes(attributes)
                if _DEESS in attributes:
                    settings.deess = _to_u8(_parse_f32(attributes[_DEESS], None))
            elif tag == _SETUP:
                settings.mic_setup.parse_attributes(attributes)
            elif tag == _UI:
                settings.ui_setup.parse_attributes(attributes)
            elif tag != _ROOT:
                _log.warning("Unhandled Tag: %s", tag)
        return settings

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the profile to ``path``, raising :class:`SaveError` on failure."""
        _log.debug("Saving File: %s", path)
        try:
            with open(path, "wb") as handle:
                self.write_to(handle)
        except OSError as exc:
            raise SaveError(exc) from exc

    def write_to(self, sink: BinaryIO) -> None:
        """Write the profile as indented UTF-8 XML to a binary file object."""
        root = ET.Element(_ROOT)
        dsp = {
            **self.equalizer.to_attributes(),
            **self.equalizer_mini.to_attributes(),
            **self.compressor.to_attributes(),
            **self.gate.to_attributes(),
            _DEESS: str(self.deess),
        }
        ET.SubElement(root, _DSP, dsp)
        ET.SubElement(root, _SETUP, self.mic_setup.to_attributes())
        ET.SubElement(root, _UI, self.ui_setup.to_attributes())
        ET.indent(root)
        sink.write(ET.tostring(root, encoding="utf-8", xml_declaration=True))