import json
import logging

from buy_vs_rent.schemas import DEFAULT_INPUTS, STORE_KEY
from buy_vs_rent.store import InputStore


def test_missing_file_gives_defaults(tmp_path):
    store = InputStore(tmp_path / "inputs.json")
    assert store.load() == DEFAULT_INPUTS


def test_saved_inputs_are_restored(tmp_path, make_inputs):
    store = InputStore(tmp_path / "inputs.json")
    store.save(make_inputs(home_price=650_000, time_horizon=15))

    loaded = store.load()
    assert loaded["home_price"] == 650_000
    assert loaded["time_horizon"] == 15
    assert loaded["initial_rent"] == DEFAULT_INPUTS["initial_rent"]


def test_partial_record_is_merged_over_defaults(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({STORE_KEY: {"homePrice": 420_000, "rentIncrease": 4}}))

    loaded = InputStore(path).load()
    assert loaded["home_price"] == 420_000
    assert loaded["rent_increase_rate"] == 4
    assert loaded["mortgage_term"] == 30


def test_unknown_saved_fields_are_dropped(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({STORE_KEY: {"showAdvanced": True}}))
    assert InputStore(path).load() == DEFAULT_INPUTS


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "inputs.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING, logger="buy_vs_rent.store"):
        loaded = InputStore(path).load()

    assert loaded == DEFAULT_INPUTS
    assert "Could not read saved inputs" in caplog.text


def test_non_object_record_falls_back_to_defaults(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({STORE_KEY: [1, 2, 3]}))
    assert InputStore(path).load() == DEFAULT_INPUTS


def test_save_keeps_other_keys(tmp_path, make_inputs):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({"theme": "dark"}))

    InputStore(path).save(make_inputs())

    document = json.loads(path.read_text())
    assert document["theme"] == "dark"
    assert document[STORE_KEY]["down_payment"] == 100_000


def test_save_creates_parent_directories(tmp_path, make_inputs):
    path = tmp_path / "nested" / "dir" / "inputs.json"
    InputStore(path).save(make_inputs())
    assert path.exists()


def test_clear(tmp_path, make_inputs):
    store = InputStore(tmp_path / "inputs.json")
    assert store.clear() is False

    store.save(make_inputs(home_price=650_000))
    assert store.clear() is True
    assert store.load() == DEFAULT_INPUTS
    assert store.clear() is False
