"""Button, channel and DCP category states reported to and by the device."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, unique


@unique
class ButtonStates(IntEnum):
    """Lighting state of a button; the value is the byte the device expects."""

    Colour1 = 0x01
    Colour2 = 0x00
    DimmedColour1 = 0x02
    DimmedColour2 = 0x04
    Flashing = 0x03


@unique
class Buttons(Enum):
    """Physical buttons; the value is the button's bit in the state word."""

    # Buttons present on the Mini.
    Fader1Mute = 4
    Fader2Mute = 9
    Fader3Mute = 14
    Fader4Mute = 19
    Bleep = 22
    MicrophoneMute = 23

    # Buttons only present on the full device; the Mini ignores them.
    EffectSelect1 = 0
    EffectSelect2 = 5
    EffectSelect3 = 10
    EffectSelect4 = 15
    EffectSelect5 = 1
    EffectSelect6 = 6

    EffectFx = 21
    EffectMegaphone = 20
    EffectRobot = 11
    EffectHardTune = 16

    SamplerSelectA = 2
    SamplerSelectB = 7
    SamplerSelectC = 12

    SamplerTopLeft = 3
    SamplerTopRight = 8
    SamplerBottomLeft = 17
    SamplerBottomRight = 13
    SamplerClear = 18


@dataclass(frozen=True)
class CurrentButtonStates:
    """Pressed buttons, fader volumes and encoder positions read from the device."""

    pressed: frozenset[Buttons] = field(default_factory=frozenset)
    volumes: tuple[int, int, int, int] = (0, 0, 0, 0)
    encoders: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pressed", frozenset(self.pressed))
        object.__setattr__(self, "volumes", tuple(self.volumes))
        object.__setattr__(self, "encoders", tuple(self.encoders))
        if len(self.volumes) != 4:
            raise ValueError(f"expected 4 volumes, got {len(self.volumes)}")
        if len(self.encoders) != 4:
            raise ValueError(f"expected 4 encoders, got {len(self.encoders)}")
        if any(not 0 <= volume <= 0xFF for volume in self.volumes):
            raise ValueError(f"volumes must be in 0..255: {self.volumes}")
        if any(not -0x80 <= encoder <= 0x7F for encoder in self.encoders):
            raise ValueError(f"encoders must be in -128..127: {self.encoders}")


@unique
class ChannelState(IntEnum):
    """Mute state of a channel; the value is the byte the device expects."""

    Muted = 0x01
    Unmuted = 0x00


@unique
class DCPCategory(IntEnum):
    """DCP categories whose support can be queried from the device."""

    Peaks = 1
    Router = 2
    Mixer = 3
    NVM = 4