import pytest

from goxlr import types
from goxlr.routing import InputDevice, OutputDevice


def test_output_positions_are_distinct_and_odd():
    positions = [
        side.position()
        for basic in types.OutputDevice
        for side in OutputDevice.from_basic(basic)
    ]
    positions.append(OutputDevice.HardTune.position())
    assert len(set(positions)) == len(positions) == 11
    assert all(position % 2 == 1 for position in positions)


def test_hardtune_is_last_output_slot():
    assert OutputDevice.HardTune.position() == max(d.position() for d in OutputDevice)


def test_left_output_precedes_right():
    for basic in types.OutputDevice:
        left, right = OutputDevice.from_basic(basic)
        assert left.position() < right.position()


@pytest.mark.parametrize("basic", list(types.OutputDevice))
def test_output_from_basic_pairs(basic):
    left, right = OutputDevice.from_basic(basic)
    assert left.name == f"{basic.name}Left"
    assert right.name == f"{basic.name}Right"


def test_every_output_except_hardtune_is_reachable():
    reached = {side for basic in types.OutputDevice for side in OutputDevice.from_basic(basic)}
    assert set(OutputDevice) - reached == {OutputDevice.HardTune}


def test_input_ids_are_distinct():
    ids = [
        side.id()
        for basic in types.InputDevice
        for side in InputDevice.from_basic(basic)
    ]
    assert len(set(ids)) == len(ids) == 16


def test_microphone_ids():
    assert InputDevice.MicrophoneLeft.id() == 0x02
    assert InputDevice.MicrophoneRight.id() == 0x03


@pytest.mark.parametrize("basic", list(types.InputDevice))
def test_input_from_basic_pairs(basic):
    left, right = InputDevice.from_basic(basic)
    assert left.name == f"{basic.name}Left"
    assert right.name == f"{basic.name}Right"
    assert right.id() == left.id() + 1


def test_every_input_is_reachable():
    reached = {side for basic in types.InputDevice for side in InputDevice.from_basic(basic)}
    assert reached == set(InputDevice)