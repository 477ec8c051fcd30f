import dataclasses

import pytest

from goxlr.types import (
    ChannelName,
    CompressorRatio,
    EffectKey,
    EncoderName,
    FirmwareVersions,
    GateTimes,
    MicrophoneParamKey,
    MicrophoneType,
    SampleButtons,
    VersionNumber,
)


def test_display_is_member_name():
    assert str(ChannelName(1)) == "LineIn"
    assert f"{EffectKey(0x0158)}" == "DisableMic"


def test_effect_key_wire_values():
    assert EffectKey(0x0158) is EffectKey.DisableMic
    assert EffectKey(0x0167) is EffectKey.PitchCharacter
    assert EffectKey(0) is EffectKey.RobotStyle


def test_microphone_param_key_wire_values():
    assert MicrophoneParamKey(0x30200) is MicrophoneParamKey.GateThreshold
    assert MicrophoneParamKey(0x70100) is MicrophoneParamKey.BleepLevel


def test_effect_keys_are_distinct():
    looked_up = [EffectKey(key.value) for key in EffectKey]
    assert looked_up == list(EffectKey)
    assert len(set(looked_up)) == len(looked_up)


def test_encoder_name_values():
    assert [EncoderName(value) for value in range(4)] == list(EncoderName)
    assert EncoderName(0x00) is EncoderName.Pitch


def test_indexed_enums_follow_declaration_order():
    for enum_type in (ChannelName, CompressorRatio, GateTimes, SampleButtons):
        members = list(enum_type)
        for index, member in enumerate(members):
            assert member.value == index
            assert enum_type(index) is member


def test_gate_times_last_entry():
    assert GateTimes(len(GateTimes) - 1) is GateTimes.Gate2000ms
    assert GateTimes(0) is GateTimes.Gate10ms


@pytest.mark.parametrize(
    ("mic_type", "param"),
    [
        (MicrophoneType.Dynamic, MicrophoneParamKey.DynamicGain),
        (MicrophoneType.Condenser, MicrophoneParamKey.CondenserGain),
        (MicrophoneType.Jack, MicrophoneParamKey.JackGain),
    ],
)
def test_gain_param(mic_type, param):
    assert mic_type.gain_param() is param


def test_only_condenser_has_phantom_power():
    assert MicrophoneType.Condenser.has_phantom_power() is True
    assert MicrophoneType.Dynamic.has_phantom_power() is False
    assert MicrophoneType.Jack.has_phantom_power() is False


def test_version_number_text():
    version = VersionNumber(1, 3, 40, 0)
    assert str(version) == "1.3.40.0"
    assert repr(version) == "1.3.40.0"


def test_version_number_ordering():
    assert VersionNumber(1, 2, 3, 4) < VersionNumber(1, 2, 4, 0)
    assert VersionNumber(2, 0, 0, 0) > VersionNumber(1, 9, 9, 9)
    assert VersionNumber(1, 1, 1, 1) == VersionNumber(1, 1, 1, 1)


def test_version_number_is_immutable():
    version = VersionNumber(1, 0, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        version.major = 2
    assert str(version) == "1.0.0.0"


def test_firmware_versions_ordering():
    older = FirmwareVersions(VersionNumber(1, 0, 0, 0), 5, VersionNumber(1, 0, 0, 0))
    newer = FirmwareVersions(VersionNumber(1, 1, 0, 0), 5, VersionNumber(1, 0, 0, 0))
    assert older < newer
    assert sorted([newer, older]) == [older, newer]