import json
import pytest
from kitchen_scaler.services.density_store import DensityValidationError


def test_missing_file_is_empty(density_store):
    assert density_store.load() == {}


def test_add_persists_normalized_name(density_store):
    density_store.add("  Matcha Powder ", 0.4)
    assert density_store.load() == {"matcha powder": 0.4}
    with open(density_store.path, encoding="utf-8") as handle:
        assert json.load(handle) == {"matcha powder": 0.4}


def test_merged_includes_custom_and_builtin(density_store):
    density_store.add("matcha", 0.4)
    merged = density_store.merged()
    assert merged["matcha"] == 0.4
    assert merged["flour"] == 0.53


def test_remove(density_store):
    density_store.add("matcha", 0.4)
    assert density_store.remove("MATCHA") == {}
    assert density_store.load() == {}


def test_remove_unknown_is_404(density_store):
    with pytest.raises(DensityValidationError) as exc_info:
        density_store.remove("nothing")
    assert exc_info.value.error_code == "DENSITY_NOT_FOUND"
    assert exc_info.value.status_code == 404


@pytest.mark.parametrize("name, value, error_code", [
    ("", 0.5, "EMPTY_DENSITY_NAME"),
    ("   ", 0.5, "EMPTY_DENSITY_NAME"),
    ("matcha", 0, "INVALID_DENSITY"),
    ("matcha", -1, "INVALID_DENSITY"),
    ("matcha", float("nan"), "INVALID_DENSITY"),
    ("Flour", 0.6, "BUILTIN_DENSITY_CONFLICT"),
])
def test_add_validation(density_store, name, value, error_code):
    with pytest.raises(DensityValidationError) as exc_info:
        density_store.add(name, value)
    assert exc_info.value.error_code == error_code
    assert exc_info.value.status_code == 400


def test_corrupt_file_is_ignored(density_store):
    with open(density_store.path, "w", encoding="utf-8") as handle:
        handle.write("{not json")
    assert density_store.load() == {}


def test_invalid_entries_are_skipped(density_store):
    with open(density_store.path, "w", encoding="utf-8") as handle:
        json.dump({"matcha": 0.4, "bad": "heavy", "zero": 0, "flag": True}, handle)
    assert density_store.load() == {"matcha": 0.4}


def test_non_object_file_is_ignored(density_store):
    with open(density_store.path, "w", encoding="utf-8") as handle:
        json.dump([1, 2, 3], handle)
    assert density_store.load() == {}
