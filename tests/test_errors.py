import zipfile

from goxlr.errors import ParseError, SaveError


def test_parse_error_with_section():
    error = ParseError("Expected float: bad", "Compressor")
    assert str(error) == "Invalid Compressor: Expected float: bad"
    assert error.section == "Compressor"
    assert error.detail == "Expected float: bad"


def test_parse_error_without_section():
    error = ParseError("IO error: gone")
    assert str(error) == "IO error: gone"
    assert error.section is None


def test_parse_error_is_a_value_error():
    error = ParseError("oops", "Gate")
    assert isinstance(error, ValueError)
    assert str(error) == "Invalid Gate: oops"
    assert error.section == "Gate"


def test_save_error_from_io():
    cause = OSError("disk full")
    error = SaveError(cause)
    assert str(error) == "IO error: disk full"
    assert error.cause is cause


def test_save_error_from_zip():
    error = SaveError(zipfile.BadZipFile("truncated"))
    assert str(error) == "Profile zip error: truncated"


def test_save_error_from_xml_writer():
    error = SaveError(ValueError("unbalanced"))
    assert str(error) == "XML Writing Error unbalanced"