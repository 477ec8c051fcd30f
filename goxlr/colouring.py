"""Positions of each lit element within the device's colour map."""

from __future__ import annotations

from enum import Enum, auto, unique


@unique
class ColourTargets(Enum):
    """Every element of the device whose colour can be set."""

    # Buttons present on the Mini.
    Fader1Mute = auto()
    Fader2Mute = auto()
    Fader3Mute = auto()
    Fader4Mute = auto()
    Bleep = auto()
    MicrophoneMute = auto()

    # Buttons only present on the full device; the Mini ignores them.
    EffectSelect1 = auto()
    EffectSelect2 = auto()
    EffectSelect3 = auto()
    EffectSelect4 = auto()
    EffectSelect5 = auto()
    EffectSelect6 = auto()

    EffectFx = auto()
    EffectMegaphone = auto()
    EffectRobot = auto()
    EffectHardTune = auto()

    SamplerSelectA = auto()
    SamplerSelectB = auto()
    SamplerSelectC = auto()

    SamplerTopLeft = auto()
    SamplerTopRight = auto()
    SamplerBottomLeft = auto()
    SamplerBottomRight = auto()
    SamplerClear = auto()

    FadeMeter1 = auto()
    FadeMeter2 = auto()
    FadeMeter3 = auto()
    FadeMeter4 = auto()

    Scribble1 = auto()
    Scribble2 = auto()
    Scribble3 = auto()
    Scribble4 = auto()

    PitchEncoder = auto()
    GenderEncoder = auto()
    ReverbEncoder = auto()
    EchoEncoder = auto()

    LogoX = auto()
    Global = auto()

    def colour_count(self) -> int:
        """How many colours this element carries."""
        if self in _SCRIBBLES:
            return 1
        if self in _ENCODERS:
            return 3
        return 2

    def is_blank_when_dimmed(self) -> bool:
        """Whether the element is written as all zeroes when its off style is 'dimmed'."""
        return self in _BLANK_WHEN_DIMMED

    def position(self, colour: int, format_1_3_40: bool) -> int:
        """Byte offset of the given colour of this element in the colour map.

        ``format_1_3_40`` selects the larger map used by newer firmware.
        Encoder dials store their colours in the order 1, 0, 2.
        """
        starts = _STARTS_1_3_40 if format_1_3_40 else _STARTS
        base = starts[self] * 4
        if self in _ENCODERS:
            if colour == 0:
                return base + 4
            if colour == 1:
                return base
        return base + colour * 4


_SCRIBBLES = frozenset(
    {
        ColourTargets.Scribble1,
        ColourTargets.Scribble2,
        ColourTargets.Scribble3,
        ColourTargets.Scribble4,
    }
)

_ENCODERS = frozenset(
    {
        ColourTargets.PitchEncoder,
        ColourTargets.GenderEncoder,
        ColourTargets.ReverbEncoder,
        ColourTargets.EchoEncoder,
    }
)

_BLANK_WHEN_DIMMED = frozenset(
    {
        ColourTargets.Fader1Mute,
        ColourTargets.Fader2Mute,
        ColourTargets.Fader3Mute,
        ColourTargets.Fader4Mute,
        ColourTargets.Bleep,
        ColourTargets.MicrophoneMute,
        ColourTargets.EffectSelect1,
        ColourTargets.EffectSelect2,
        ColourTargets.EffectSelect3,
        ColourTargets.EffectSelect4,
        ColourTargets.EffectSelect5,
        ColourTargets.EffectSelect6,
        ColourTargets.EffectFx,
        ColourTargets.EffectMegaphone,
        ColourTargets.EffectRobot,
        ColourTargets.EffectHardTune,
        ColourTargets.SamplerSelectA,
        ColourTargets.SamplerSelectB,
        ColourTargets.SamplerSelectC,
    }
)

_STARTS = {
    ColourTargets.Fader1Mute: 12,
    ColourTargets.Fader2Mute: 14,
    ColourTargets.Fader3Mute: 16,
    ColourTargets.Fader4Mute: 18,
    ColourTargets.Bleep: 78,
    ColourTargets.MicrophoneMute: 80,
    ColourTargets.EffectSelect1: 29,
    ColourTargets.EffectSelect2: 31,
    ColourTargets.EffectSelect3: 33,
    ColourTargets.EffectSelect4: 35,
    ColourTargets.EffectSelect5: 37,
    ColourTargets.EffectSelect6: 39,
    ColourTargets.EffectFx: 76,
    ColourTargets.EffectMegaphone: 70,
    ColourTargets.EffectRobot: 72,
    ColourTargets.EffectHardTune: 74,
    ColourTargets.SamplerSelectA: 54,
    ColourTargets.SamplerSelectB: 56,
    ColourTargets.SamplerSelectC: 58,
    ColourTargets.SamplerTopLeft: 62,
    ColourTargets.SamplerTopRight: 64,
    ColourTargets.SamplerBottomLeft: 66,
    ColourTargets.SamplerBottomRight: 68,
    ColourTargets.SamplerClear: 60,
    ColourTargets.FadeMeter1: 20,
    ColourTargets.FadeMeter2: 22,
    ColourTargets.FadeMeter3: 24,
    ColourTargets.FadeMeter4: 26,
    ColourTargets.Scribble1: 0,
    ColourTargets.Scribble2: 2,
    ColourTargets.Scribble3: 4,
    ColourTargets.Scribble4: 6,
    ColourTargets.PitchEncoder: 41,
    ColourTargets.GenderEncoder: 44,
    ColourTargets.ReverbEncoder: 47,
    ColourTargets.EchoEncoder: 50,
    ColourTargets.LogoX: 8,
    ColourTargets.Global: 10,
}

# Newer firmware shifts everything except scribbles, mutes, fader meters,
# global and logo by 48, and spreads the fader meters further apart.
_STARTS_1_3_40 = {
    ColourTargets.Fader1Mute: 12,
    ColourTargets.Fader2Mute: 14,
    ColourTargets.Fader3Mute: 16,
    ColourTargets.Fader4Mute: 18,
    ColourTargets.Bleep: 126,
    ColourTargets.MicrophoneMute: 128,
    ColourTargets.EffectSelect1: 77,
    ColourTargets.EffectSelect2: 79,
    ColourTargets.EffectSelect3: 81,
    ColourTargets.EffectSelect4: 83,
    ColourTargets.EffectSelect5: 85,
    ColourTargets.EffectSelect6: 87,
    ColourTargets.EffectFx: 124,
    ColourTargets.EffectMegaphone: 118,
    ColourTargets.EffectRobot: 120,
    ColourTargets.EffectHardTune: 122,
    ColourTargets.SamplerSelectA: 102,
    ColourTargets.SamplerSelectB: 104,
    ColourTargets.SamplerSelectC: 106,
    ColourTargets.SamplerTopLeft: 110,
    ColourTargets.SamplerTopRight: 112,
    ColourTargets.SamplerBottomLeft: 114,
    ColourTargets.SamplerBottomRight: 116,
    ColourTargets.SamplerClear: 108,
    ColourTargets.FadeMeter1: 20,
    ColourTargets.FadeMeter2: 34,
    ColourTargets.FadeMeter3: 48,
    ColourTargets.FadeMeter4: 62,
    ColourTargets.Scribble1: 0,
    ColourTargets.Scribble2: 2,
    ColourTargets.Scribble3: 4,
    ColourTargets.Scribble4: 6,
    ColourTargets.PitchEncoder: 89,
    ColourTargets.GenderEncoder: 92,
    ColourTargets.ReverbEncoder: 95,
    ColourTargets.EchoEncoder: 98,
    ColourTargets.LogoX: 8,
    ColourTargets.Global: 10,
}