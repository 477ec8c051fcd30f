"""Shared device enumerations and version types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique


class _NamedEnum(int, Enum):
    """Integer-valued enum whose text form is the bare member name.

    Members declared with ``auto()`` take their position in the declaration,
    starting at zero.
    """

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)


@unique
class ChannelName(_NamedEnum):
    Mic = auto()
    LineIn = auto()
    Console = auto()
    System = auto()
    Game = auto()
    Chat = auto()
    Sample = auto()
    Music = auto()
    Headphones = auto()
    MicMonitor = auto()
    LineOut = auto()


@unique
class FaderName(_NamedEnum):
    A = auto()
    B = auto()
    C = auto()
    D = auto()


@unique
class EncoderName(_NamedEnum):
    Pitch = 0x00
    Gender = 0x01
    Reverb = 0x02
    Echo = 0x03


@unique
class OutputDevice(_NamedEnum):
    Headphones = auto()
    BroadcastMix = auto()
    LineOut = auto()
    ChatMic = auto()
    Sampler = auto()


@unique
class InputDevice(_NamedEnum):
    Microphone = auto()
    Chat = auto()
    Music = auto()
    Game = auto()
    Console = auto()
    LineIn = auto()
    System = auto()
    Samples = auto()


@unique
class EffectKey(_NamedEnum):
    DisableMic = 0x0158
    BleepLevel = 0x0073
    GateMode = 0x0010
    GateThreshold = 0x0011
    GateEnabled = 0x0014
    GateAttenuation = 0x0015
    GateAttack = 0x0016
    GateRelease = 0x0017
    Unknown14b = 0x014B
    Equalizer31HzFrequency = 0x0126
    Equalizer31HzGain = 0x0127
    Equalizer63HzFrequency = 0x00F8
    Equalizer63HzGain = 0x00F9
    Equalizer125HzFrequency = 0x0113
    Equalizer125HzGain = 0x0114
    Equalizer250HzFrequency = 0x0129
    Equalizer250HzGain = 0x012A
    Equalizer500HzFrequency = 0x0116
    Equalizer500HzGain = 0x0117
    Equalizer1KHzFrequency = 0x011D
    Equalizer1KHzGain = 0x011E
    Equalizer2KHzFrequency = 0x012C
    Equalizer2KHzGain = 0x012D
    Equalizer4KHzFrequency = 0x0120
    Equalizer4KHzGain = 0x0121
    Equalizer8KHzFrequency = 0x0109
    Equalizer8KHzGain = 0x010A
    Equalizer16KHzFrequency = 0x012F
    Equalizer16KHzGain = 0x0130
    CompressorThreshold = 0x013D
    CompressorRatio = 0x013C
    CompressorAttack = 0x013E
    CompressorRelease = 0x013F
    CompressorMakeUpGain = 0x0140
    DeEsser = 0x000B
    ReverbAmount = 0x0076
    ReverbDecay = 0x002F
    ReverbEarlyLevel = 0x0037
    ReverbTailLevel = 0x0039  # Always sent as 0.
    ReverbPredelay = 0x0030
    ReverbLoColor = 0x0032
    ReverbHiColor = 0x0033
    ReverbHiFactor = 0x0034
    ReverbDiffuse = 0x0031
    ReverbModSpeed = 0x0035
    ReverbModDepth = 0x0036
    ReverbStyle = 0x002E
    EchoAmount = 0x0075
    EchoFeedback = 0x0028
    EchoTempo = 0x001F
    EchoDelayL = 0x0022
    EchoDelayR = 0x0023
    EchoFeedbackL = 0x0024
    EchoFeedbackR = 0x0025
    EchoXFBLtoR = 0x0026
    EchoXFBRtoL = 0x0027
    EchoSource = 0x001E
    EchoDivL = 0x0020
    EchoDivR = 0x0021
    EchoFilterStyle = 0x002A
    PitchAmount = 0x005D
    PitchCharacter = 0x0167
    PitchThreshold = 0x0159
    GenderAmount = 0x0060
    MegaphoneAmount = 0x003C
    MegaphonePostGain = 0x0040
    MegaphoneStyle = 0x003A
    MegaphoneHP = 0x003D
    MegaphoneLP = 0x003E
    MegaphonePreGain = 0x003F
    MegaphoneDistType = 0x0041
    MegaphonePresenceGain = 0x0042
    MegaphonePresenceFC = 0x0043
    MegaphonePresenceBW = 0x0044
    MegaphoneBeatboxEnable = 0x0045
    MegaphoneFilterControl = 0x0046
    MegaphoneFilter = 0x0047
    MegaphoneDrivePotGainCompMid = 0x0048
    MegaphoneDrivePotGainCompMax = 0x0049
    RobotLowGain = 0x0134
    RobotLowFreq = 0x0133
    RobotLowWidth = 0x0135
    RobotMidGain = 0x013A
    RobotMidFreq = 0x0139
    RobotMidWidth = 0x013B
    RobotHiGain = 0x0137
    RobotHiFreq = 0x0136
    RobotHiWidth = 0x0138
    RobotWaveform = 0x0147
    RobotPulseWidth = 0x0146
    RobotThreshold = 0x0157
    RobotDryMix = 0x014D
    RobotStyle = 0x0000
    HardTuneKeySource = 0x0059  # Always sent as 0.
    HardTuneAmount = 0x005A
    HardTuneRate = 0x005C
    HardTuneWindow = 0x005B
    HardTuneScale = 0x005E
    HardTunePitchAmount = 0x005F

    RobotEnabled = 0x014E
    MegaphoneEnabled = 0x00D7
    HardTuneEnabled = 0x00D8

    Encoder1Enabled = 0x00D5
    Encoder2Enabled = 0x00D6
    Encoder3Enabled = 0x0150
    Encoder4Enabled = 0x0151


@unique
class MicrophoneParamKey(_NamedEnum):
    MicType = 0x000
    DynamicGain = 0x001
    CondenserGain = 0x002
    JackGain = 0x003
    GateThreshold = 0x30200
    GateAttack = 0x30400
    GateRelease = 0x30600
    GateAttenuation = 0x30900
    CompressorThreshold = 0x60200
    CompressorRatio = 0x60300
    CompressorAttack = 0x60400
    CompressorRelease = 0x60600
    CompressorMakeUpGain = 0x60700
    BleepLevel = 0x70100

    # The Mini does its EQ through microphone parameters rather than effects.
    Equalizer90HzFrequency = 0x40000
    Equalizer90HzGain = 0x40001
    Equalizer250HzFrequency = 0x40003
    Equalizer250HzGain = 0x40004
    Equalizer500HzFrequency = 0x40006
    Equalizer500HzGain = 0x40007
    Equalizer1KHzFrequency = 0x50000
    Equalizer1KHzGain = 0x50001
    Equalizer3KHzFrequency = 0x50003
    Equalizer3KHzGain = 0x50004
    Equalizer8KHzFrequency = 0x50006
    Equalizer8KHzGain = 0x50007


@unique
class FaderDisplayStyle(_NamedEnum):
    TwoColour = auto()
    Gradient = auto()
    Meter = auto()
    GradientMeter = auto()


@unique
class ButtonColourTargets(_NamedEnum):
    # Buttons present on the Mini.
    Fader1Mute = auto()
    Fader2Mute = auto()
    Fader3Mute = auto()
    Fader4Mute = auto()
    Bleep = auto()
    Cough = auto()

    # Buttons only present on the full device.
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


@unique
class ButtonColourGroups(_NamedEnum):
    FaderMute = auto()
    EffectSelector = auto()
    SampleBankSelector = auto()
    SamplerButtons = auto()


@unique
class ButtonColourOffStyle(_NamedEnum):
    Dimmed = auto()
    Colour2 = auto()
    DimmedColour2 = auto()


@unique
class SimpleColourTargets(_NamedEnum):
    Global = auto()
    Scribble1 = auto()
    Scribble2 = auto()
    Scribble3 = auto()
    Scribble4 = auto()


@unique
class EncoderColourTargets(_NamedEnum):
    Reverb = auto()
    Pitch = auto()
    Echo = auto()
    Gender = auto()


@unique
class MuteFunction(_NamedEnum):
    All = auto()
    ToStream = auto()
    ToVoiceChat = auto()
    ToPhones = auto()
    ToLineOut = auto()


@unique
class MicrophoneType(_NamedEnum):
    Dynamic = auto()
    Condenser = auto()
    Jack = auto()

    def gain_param(self) -> MicrophoneParamKey:
        """The microphone parameter that carries the gain for this input type."""
        return _GAIN_PARAMS[self]

    def has_phantom_power(self) -> bool:
        """Whether this input type is driven with phantom power."""
        return self is MicrophoneType.Condenser


_GAIN_PARAMS = {
    MicrophoneType.Dynamic: MicrophoneParamKey.DynamicGain,
    MicrophoneType.Condenser: MicrophoneParamKey.CondenserGain,
    MicrophoneType.Jack: MicrophoneParamKey.JackGain,
}


@unique
class EffectBankPresets(_NamedEnum):
    Preset1 = auto()
    Preset2 = auto()
    Preset3 = auto()
    Preset4 = auto()
    Preset5 = auto()
    Preset6 = auto()


@unique
class SampleBank(_NamedEnum):
    A = auto()
    B = auto()
    C = auto()


@unique
class MiniEqFrequencies(_NamedEnum):
    Equalizer90Hz = auto()
    Equalizer250Hz = auto()
    Equalizer500Hz = auto()
    Equalizer1KHz = auto()
    Equalizer3KHz = auto()
    Equalizer8KHz = auto()


@unique
class EqFrequencies(_NamedEnum):
    Equalizer31Hz = auto()
    Equalizer63Hz = auto()
    Equalizer125Hz = auto()
    Equalizer250Hz = auto()
    Equalizer500Hz = auto()
    Equalizer1KHz = auto()
    Equalizer2KHz = auto()
    Equalizer4KHz = auto()
    Equalizer8KHz = auto()
    Equalizer16KHz = auto()


# The device maps several non-linear settings onto fixed tables of values and
# is sent the index into that table. The enums below mirror those tables: a
# member's integer value is the index the device expects.


@unique
class CompressorRatio(_NamedEnum):
    Ratio1_0 = auto()
    Ratio1_1 = auto()
    Ratio1_2 = auto()
    Ratio1_4 = auto()
    Ratio1_6 = auto()
    Ratio1_8 = auto()
    Ratio2_0 = auto()
    Ratio2_5 = auto()
    Ratio3_2 = auto()
    Ratio4_0 = auto()
    Ratio5_6 = auto()
    Ratio8_0 = auto()
    Ratio16_0 = auto()
    Ratio32_0 = auto()
    Ratio64_0 = auto()


@unique
class GateTimes(_NamedEnum):
    Gate10ms = auto()
    Gate20ms = auto()
    Gate30ms = auto()
    Gate40ms = auto()
    Gate50ms = auto()
    Gate60ms = auto()
    Gate70ms = auto()
    Gate80ms = auto()
    Gate90ms = auto()
    Gate100ms = auto()
    Gate110ms = auto()
    Gate120ms = auto()
    Gate130ms = auto()
    Gate140ms = auto()
    Gate150ms = auto()
    Gate160ms = auto()
    Gate170ms = auto()
    Gate180ms = auto()
    Gate190ms = auto()
    Gate200ms = auto()
    Gate250ms = auto()
    Gate300ms = auto()
    Gate350ms = auto()
    Gate400ms = auto()
    Gate450ms = auto()
    Gate500ms = auto()
    Gate550ms = auto()
    Gate600ms = auto()
    Gate650ms = auto()
    Gate700ms = auto()
    Gate750ms = auto()
    Gate800ms = auto()
    Gate850ms = auto()
    Gate900ms = auto()
    Gate950ms = auto()
    Gate1000ms = auto()
    Gate1100ms = auto()
    Gate1200ms = auto()
    Gate1300ms = auto()
    Gate1400ms = auto()
    Gate1500ms = auto()
    Gate1600ms = auto()
    Gate1700ms = auto()
    Gate1800ms = auto()
    Gate1900ms = auto()
    Gate2000ms = auto()


@unique
class CompressorAttackTime(_NamedEnum):
    # 0ms is really 0.001ms.
    Comp0ms = auto()
    Comp2ms = auto()
    Comp3ms = auto()
    Comp4ms = auto()
    Comp5ms = auto()
    Comp6ms = auto()
    Comp7ms = auto()
    Comp8ms = auto()
    Comp9ms = auto()
    Comp10ms = auto()
    Comp12ms = auto()
    Comp14ms = auto()
    Comp16ms = auto()
    Comp18ms = auto()
    Comp20ms = auto()
    Comp23ms = auto()
    Comp26ms = auto()
    Comp30ms = auto()
    Comp35ms = auto()
    Comp40ms = auto()


@unique
class CompressorReleaseTime(_NamedEnum):
    # 0ms is really 15ms.
    Comp0ms = auto()
    Comp15ms = auto()
    Comp25ms = auto()
    Comp35ms = auto()
    Comp45ms = auto()
    Comp55ms = auto()
    Comp65ms = auto()
    Comp75ms = auto()
    Comp85ms = auto()
    Comp100ms = auto()
    Comp115ms = auto()
    Comp140ms = auto()
    Comp170ms = auto()
    Comp230ms = auto()
    Comp340ms = auto()
    Comp680ms = auto()
    Comp1000ms = auto()
    Comp1500ms = auto()
    Comp2000ms = auto()
    Comp3000ms = auto()


@unique
class SampleButtons(_NamedEnum):
    TopLeft = auto()
    TopRight = auto()
    BottomLeft = auto()
    BottomRight = auto()
    Clear = auto()


@dataclass(frozen=True, order=True)
class VersionNumber:
    """A four-part version number, ordered field by field."""

    major: int
    minor: int
    patch: int
    build: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True, order=True)
class FirmwareVersions:
    """Firmware, FPGA and DICE versions reported by a device."""

    firmware: VersionNumber
    fpga_count: int
    dice: VersionNumber