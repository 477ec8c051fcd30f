import pytest

from goxlr.equalizer import Equalizer, goxlr_frequency
from goxlr.errors import ParseError
from goxlr.types import EqFrequencies


def test_default_frequencies_and_gains():
    eq = Equalizer()
    assert eq.frequencies[EqFrequencies.Equalizer31Hz] == 31.5
    assert eq.frequencies[EqFrequencies.Equalizer16KHz] == 16000.0
    assert all(eq.gains[band] == 0 for band in EqFrequencies)
    assert set(eq.frequencies) == set(EqFrequencies)


def test_to_attributes_has_gain_and_frequency_per_band():
    attributes = Equalizer().to_attributes()
    assert len(attributes) == 20
    assert attributes["MIC_EQ_31.5HZ_F"] == "31.5"
    assert "MIC_EQ_16KHZ_GAIN" in attributes


def test_whole_frequencies_are_written_without_fraction():
    attributes = Equalizer().to_attributes()
    assert attributes["MIC_EQ_1KHZ_F"] == "1000"


def test_parse_reads_gain_and_frequency():
    eq = Equalizer()
    eq.parse_attributes({"MIC_EQ_2KHZ_GAIN": "-7", "MIC_EQ_2KHZ_F": "2250.5"})
    assert eq.gains[EqFrequencies.Equalizer2KHz] == -7
    assert eq.frequencies[EqFrequencies.Equalizer2KHz] == 2250.5


def test_gain_saturates_to_signed_byte():
    eq = Equalizer()
    eq.parse_attributes({"MIC_EQ_63HZ_GAIN": "-500", "MIC_EQ_125HZ_GAIN": "500"})
    assert eq.gains[EqFrequencies.Equalizer63Hz] == -128
    assert eq.gains[EqFrequencies.Equalizer125Hz] == 127


def test_unknown_attributes_are_ignored():
    eq = Equalizer()
    eq.parse_attributes({"MIC_MINI_EQ_90HZ_GAIN": "5", "MIC_COMP_RATIO": "3"})
    assert eq == Equalizer()


@pytest.mark.parametrize("text", ["0.1", "31.5", "12345.678"])
def test_frequency_text_round_trips(text):
    eq = Equalizer()
    eq.parse_attributes({"MIC_EQ_500HZ_F": text})
    assert eq.to_attributes()["MIC_EQ_500HZ_F"] == text


def test_full_round_trip():
    original = Equalizer()
    for offset, band in enumerate(EqFrequencies):
        original.gains[band] = offset - 5
        original.frequencies[band] = 20.0 + offset * 100.25
    restored = Equalizer()
    restored.parse_attributes(original.to_attributes())
    assert restored == original


def test_invalid_frequency_raises_parse_error():
    eq = Equalizer()
    with pytest.raises(ParseError) as info:
        eq.parse_attributes({"MIC_EQ_1KHZ_F": "loud"})
    assert str(info.value).startswith("Invalid Equalizer: Expected float")


def test_goxlr_frequency_pinned_values():
    assert goxlr_frequency(20.0) == 0
    assert goxlr_frequency(40.0) == 24


def test_goxlr_frequency_is_monotonic_over_defaults():
    eq = Equalizer()
    values = [eq.frequency_as_goxlr(band) for band in EqFrequencies]
    assert values == sorted(values)
    assert len(set(values)) == len(values)