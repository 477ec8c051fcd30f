import pytest

from goxlr.compressor import Compressor
from goxlr.errors import ParseError

KEYS = {
    "MIC_COMP_THRESHOLD",
    "MIC_COMP_RATIO",
    "MIC_COMP_ATTACK",
    "MIC_COMP_RELEASE",
    "MIC_COMP_MAKEUPGAIN",
}


def test_defaults_are_zero():
    assert Compressor() == Compressor(0, 0, 0, 0, 0)


def test_parse_whole_numbers():
    compressor = Compressor()
    compressor.parse_attributes(
        {
            "MIC_COMP_THRESHOLD": "-12",
            "MIC_COMP_RATIO": "5",
            "MIC_COMP_ATTACK": "3",
            "MIC_COMP_RELEASE": "7",
            "MIC_COMP_MAKEUPGAIN": "9",
        }
    )
    assert compressor == Compressor(-12, 5, 3, 7, 9)


def test_fractions_truncate_toward_zero():
    compressor = Compressor()
    compressor.parse_attributes({"MIC_COMP_THRESHOLD": "-20.9", "MIC_COMP_RATIO": "4.99"})
    assert compressor.threshold == -20
    assert compressor.ratio == 4


def test_out_of_range_values_saturate():
    compressor = Compressor()
    compressor.parse_attributes(
        {"MIC_COMP_RATIO": "300", "MIC_COMP_ATTACK": "-5", "MIC_COMP_THRESHOLD": "-1000"}
    )
    assert compressor.ratio == 255
    assert compressor.attack == 0
    assert compressor.threshold == -128


def test_nan_becomes_zero():
    compressor = Compressor(release=8)
    compressor.parse_attributes({"MIC_COMP_RELEASE": "NaN"})
    assert compressor.release == 0


def test_unrelated_attributes_are_ignored():
    compressor = Compressor(ratio=3)
    compressor.parse_attributes({"MIC_GATE_ATTACK": "not a number"})
    assert compressor == Compressor(ratio=3)


def test_to_attributes_keys_and_text():
    attributes = Compressor(-12, 5, 3, 7, 9).to_attributes()
    assert set(attributes) == KEYS
    assert attributes["MIC_COMP_THRESHOLD"] == "-12"
    assert attributes["MIC_COMP_MAKEUPGAIN"] == "9"


def test_round_trip():
    original = Compressor(-40, 14, 19, 2, 24)
    restored = Compressor()
    restored.parse_attributes(original.to_attributes())
    assert restored == original


@pytest.mark.parametrize("bad", ["abc", "", " 5", "1_0"])
def test_bad_numbers_raise(bad):
    with pytest.raises(ParseError, match="^Invalid Compressor: Expected float"):
        Compressor().parse_attributes({"MIC_COMP_RATIO": bad})