import pytest

from goxlr.commands import Command, CommandKind, HardwareInfoCommand, SystemInfoCommand
from goxlr.routing import InputDevice
from goxlr.types import ChannelName, EncoderName, FaderName


def test_reset_command_index_is_zero():
    assert Command(CommandKind.ResetCommandIndex).command_id() == 0


def test_system_info_ids():
    assert SystemInfoCommand.FirmwareVersion.id() == 2
    assert SystemInfoCommand.SupportsDCPCategory.id() == 1
    command = Command(CommandKind.SystemInfo, SystemInfoCommand.SupportsDCPCategory)
    assert command.command_id() == 1


def test_hardware_info_values():
    assert HardwareInfoCommand(0) is HardwareInfoCommand.FirmwareVersion
    assert HardwareInfoCommand(1) is HardwareInfoCommand.SerialNumber


@pytest.mark.parametrize(
    "kind, prefix",
    [
        (CommandKind.GetButtonStates, 0x800),
        (CommandKind.SetEffectParameters, 0x801),
        (CommandKind.SetColourMap, 0x803),
        (CommandKind.SetButtonStates, 0x808),
        (CommandKind.SetMicrophoneParameters, 0x80B),
        (CommandKind.GetMicrophoneLevel, 0x80C),
    ],
)
def test_commands_without_argument(kind, prefix):
    assert Command(kind).command_id() == prefix << 12


def test_set_channel_state_for_mic_is_bare_prefix():
    assert Command(CommandKind.SetChannelState, ChannelName.Mic).command_id() == 0x809 << 12


def test_set_routing_uses_input_identifier():
    command = Command(CommandKind.SetRouting, InputDevice.MicrophoneLeft)
    assert command.command_id() == (0x804 << 12) | 0x02


def test_hardware_serial_number():
    command = Command(CommandKind.GetHardwareInfo, HardwareInfoCommand.SerialNumber)
    assert command.command_id() == (0x80F << 12) | 1


@pytest.mark.parametrize(
    "kind",
    [CommandKind.SetFader, CommandKind.SetScribble, CommandKind.SetFaderDisplayMode],
)
def test_fader_commands_share_prefix_and_carry_fader(kind):
    ids = [Command(kind, fader).command_id() for fader in FaderName]
    assert len({command_id >> 12 for command_id in ids}) == 1
    assert [command_id & 0xFFF for command_id in ids] == [fader.value for fader in FaderName]


def test_encoder_value_and_mode_differ():
    value = Command(CommandKind.SetEncoderValue, EncoderName.Echo).command_id()
    mode = Command(CommandKind.SetEncoderMode, EncoderName.Echo).command_id()
    assert value & 0xFFF == mode & 0xFFF == EncoderName.Echo.value
    assert value >> 12 == 0x80A
    assert mode >> 12 == 0x811


def test_commands_compare_by_value():
    assert Command(CommandKind.ResetCommandIndex) == Command(CommandKind.ResetCommandIndex)
    assert Command(CommandKind.SetFader, FaderName.A) != Command(CommandKind.SetFader, FaderName.B)


def test_missing_argument_is_rejected():
    with pytest.raises(TypeError):
        Command(CommandKind.SetFader)


def test_unexpected_argument_is_rejected():
    with pytest.raises(TypeError):
        Command(CommandKind.GetButtonStates, FaderName.A)


def test_wrong_argument_type_is_rejected():
    with pytest.raises(TypeError):
        Command(CommandKind.SetChannelVolume, FaderName.A)