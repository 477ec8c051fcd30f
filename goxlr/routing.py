"""Stereo routing channels and their positions in the routing table."""

from __future__ import annotations

from enum import Enum, unique

from .types import InputDevice as BasicInputDevice
from .types import OutputDevice as BasicOutputDevice


@unique
class OutputDevice(Enum):
    """A single side of an output; the value is its slot in a routing row."""

    HeadphonesRight = 3
    HeadphonesLeft = 1
    BroadcastMixRight = 7
    BroadcastMixLeft = 5
    ChatMicRight = 11
    ChatMicLeft = 9
    SamplerRight = 15
    SamplerLeft = 13
    LineOutRight = 19
    LineOutLeft = 17
    HardTune = 21

    def position(self) -> int:
        """Offset of this output within a routing row."""
        return self.value

    @classmethod
    def from_basic(cls, basic: BasicOutputDevice) -> tuple[OutputDevice, OutputDevice]:
        """The (left, right) pair for a basic output device."""
        return _OUTPUT_PAIRS[basic]


_OUTPUT_PAIRS = {
    BasicOutputDevice.Headphones: (OutputDevice.HeadphonesLeft, OutputDevice.HeadphonesRight),
    BasicOutputDevice.BroadcastMix: (
        OutputDevice.BroadcastMixLeft,
        OutputDevice.BroadcastMixRight,
    ),
    BasicOutputDevice.ChatMic: (OutputDevice.ChatMicLeft, OutputDevice.ChatMicRight),
    BasicOutputDevice.Sampler: (OutputDevice.SamplerLeft, OutputDevice.SamplerRight),
    BasicOutputDevice.LineOut: (OutputDevice.LineOutLeft, OutputDevice.LineOutRight),
}


@unique
class InputDevice(Enum):
    """A single side of an input; the value is the device's identifier for it."""

    MicrophoneRight = 0x03
    MicrophoneLeft = 0x02
    MusicRight = 0x0F
    MusicLeft = 0x0E
    GameRight = 0x0B
    GameLeft = 0x0A
    ChatRight = 0x0D
    ChatLeft = 0x0C
    ConsoleRight = 0x07
    ConsoleLeft = 0x06
    LineInRight = 0x05
    LineInLeft = 0x04
    SystemRight = 0x09
    SystemLeft = 0x08
    SamplesRight = 0x11
    SamplesLeft = 0x10

    def id(self) -> int:
        """Identifier the device uses for this input."""
        return self.value

    @classmethod
    def from_basic(cls, basic: BasicInputDevice) -> tuple[InputDevice, InputDevice]:
        """The (left, right) pair for a basic input device."""
        return _INPUT_PAIRS[basic]


_INPUT_PAIRS = {
    BasicInputDevice.Microphone: (InputDevice.MicrophoneLeft, InputDevice.MicrophoneRight),
    BasicInputDevice.Chat: (InputDevice.ChatLeft, InputDevice.ChatRight),
    BasicInputDevice.Music: (InputDevice.MusicLeft, InputDevice.MusicRight),
    BasicInputDevice.Game: (InputDevice.GameLeft, InputDevice.GameRight),
    BasicInputDevice.Console: (InputDevice.ConsoleLeft, InputDevice.ConsoleRight),
    BasicInputDevice.LineIn: (InputDevice.LineInLeft, InputDevice.LineInRight),
    BasicInputDevice.System: (InputDevice.SystemLeft, InputDevice.SystemRight),
    BasicInputDevice.Samples: (InputDevice.SamplesLeft, InputDevice.SamplesRight),
}