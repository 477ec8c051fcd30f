from goxlr.ui_setup import UiSetup


def test_defaults_write_as_zero():
    assert UiSetup().to_attributes() == {
        "eqAdvanced": "0",
        "compAdvanced": "0",
        "gateAdvanced": "0",
        "eqFineTuneEnabled": "0",
    }


def test_parse_sets_flags_from_one():
    ui = UiSetup()
    ui.parse_attributes({"eqAdvanced": "1", "gateAdvanced": "1", "compAdvanced": "0"})
    assert ui == UiSetup(eq_advanced=True, gate_advanced=True)


def test_only_one_counts_as_enabled():
    ui = UiSetup(eq_fine_tune=True)
    ui.parse_attributes({"eqFineTuneEnabled": "true"})
    assert ui.eq_fine_tune is False


def test_unknown_attributes_ignored():
    ui = UiSetup()
    ui.parse_attributes({"somethingElse": "1"})
    assert ui == UiSetup()


def test_round_trip():
    ui = UiSetup(comp_advanced=True, eq_fine_tune=True)
    copy = UiSetup()
    copy.parse_attributes(ui.to_attributes())
    assert copy == ui
    assert ui.to_attributes()["compAdvanced"] == "1"