"""Command identifiers sent in the header of every device request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto, unique
from typing import Union

from .routing import InputDevice
from .types import ChannelName, EncoderName, FaderName


@unique
class SystemInfoCommand(Enum):
    """System information requests; the value is the command identifier."""

    FirmwareVersion = 2
    SupportsDCPCategory = 1

    def id(self) -> int:
        """Command identifier for this request."""
        return self.value


@unique
class HardwareInfoCommand(IntEnum):
    """Hardware information requests."""

    FirmwareVersion = 0
    SerialNumber = 1


@unique
class CommandKind(Enum):
    """The kinds of request the device understands."""

    ResetCommandIndex = auto()
    SystemInfo = auto()
    SetChannelState = auto()
    SetChannelVolume = auto()
    SetEncoderValue = auto()
    SetEncoderMode = auto()
    SetFader = auto()
    SetRouting = auto()
    SetButtonStates = auto()
    SetEffectParameters = auto()
    SetMicrophoneParameters = auto()
    GetMicrophoneLevel = auto()
    SetColourMap = auto()
    SetFaderDisplayMode = auto()
    SetScribble = auto()
    GetButtonStates = auto()
    GetHardwareInfo = auto()


CommandArgument = Union[
    SystemInfoCommand, HardwareInfoCommand, ChannelName, EncoderName, FaderName, InputDevice, None
]

_ARGUMENT_TYPES: dict[CommandKind, type | None] = {
    CommandKind.ResetCommandIndex: None,
    CommandKind.SystemInfo: SystemInfoCommand,
    CommandKind.SetChannelState: ChannelName,
    CommandKind.SetChannelVolume: ChannelName,
    CommandKind.SetEncoderValue: EncoderName,
    CommandKind.SetEncoderMode: EncoderName,
    CommandKind.SetFader: FaderName,
    CommandKind.SetRouting: InputDevice,
    CommandKind.SetButtonStates: None,
    CommandKind.SetEffectParameters: None,
    CommandKind.SetMicrophoneParameters: None,
    CommandKind.GetMicrophoneLevel: None,
    CommandKind.SetColourMap: None,
    CommandKind.SetFaderDisplayMode: FaderName,
    CommandKind.SetScribble: FaderName,
    CommandKind.GetButtonStates: None,
    CommandKind.GetHardwareInfo: HardwareInfoCommand,
}

_PREFIXES: dict[CommandKind, int] = {
    CommandKind.SetChannelState: 0x809,
    CommandKind.SetChannelVolume: 0x806,
    CommandKind.SetEncoderValue: 0x80A,
    CommandKind.SetEncoderMode: 0x811,
    CommandKind.SetFader: 0x805,
    CommandKind.SetRouting: 0x804,
    CommandKind.SetColourMap: 0x803,
    CommandKind.SetButtonStates: 0x808,
    CommandKind.SetFaderDisplayMode: 0x814,
    CommandKind.SetScribble: 0x802,
    CommandKind.GetButtonStates: 0x800,
    CommandKind.GetHardwareInfo: 0x80F,
    CommandKind.GetMicrophoneLevel: 0x80C,
    CommandKind.SetMicrophoneParameters: 0x80B,
    CommandKind.SetEffectParameters: 0x801,
}


@dataclass(frozen=True)
class Command:
    """A request kind together with the target it applies to, if any."""

    kind: CommandKind
    argument: CommandArgument = None

    def __post_init__(self) -> None:
        expected = _ARGUMENT_TYPES[self.kind]
        if expected is None:
            if self.argument is not None:
                raise TypeError(f"{self.kind.name} takes no argument, got {self.argument!r}")
        elif not isinstance(self.argument, expected):
            raise TypeError(
                f"{self.kind.name} needs a {expected.__name__}, got {self.argument!r}"
            )

    def command_id(self) -> int:
        """The 32-bit identifier placed in the request header."""
        if self.kind is CommandKind.ResetCommandIndex:
            return 0
        if self.kind is CommandKind.SystemInfo:
            return self.argument.id()
        prefix = _PREFIXES[self.kind] << 12
        if self.argument is None:
            return prefix
        if isinstance(self.argument, InputDevice):
            return prefix | self.argument.id()
        return prefix | int(self.argument)