"""Tests for custom study-hour override storage."""
import json

import pytest

from study_planner.overrides import clear_custom_hours, load_custom_hours, save_custom_hours


def test_missing_file_means_no_overrides(tmp_path) -> None:
    assert load_custom_hours(tmp_path / "nope.json") == {}


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "hours.json"

    save_custom_hours(path, "e1-2026-10-21", 4)
    overrides = save_custom_hours(path, "q1-2026-10-20", 1.5)

    assert overrides == {"e1-2026-10-21": 4.0, "q1-2026-10-20": 1.5}
    assert load_custom_hours(path) == overrides
    assert json.loads(path.read_text()) == overrides


def test_last_write_wins(tmp_path) -> None:
    path = tmp_path / "hours.json"

    save_custom_hours(path, "k", 2)
    save_custom_hours(path, "k", 0)

    assert load_custom_hours(path) == {"k": 0.0}


@pytest.mark.parametrize("hours", [-0.5, 20.5, 100])
def test_out_of_range_hours_are_rejected(tmp_path, hours: float) -> None:
    path = tmp_path / "hours.json"

    with pytest.raises(ValueError, match="between 0 and 20"):
        save_custom_hours(path, "k", hours)
    assert not path.exists()


def test_clear(tmp_path) -> None:
    path = tmp_path / "hours.json"
    save_custom_hours(path, "a", 1)
    save_custom_hours(path, "b", 2)

    assert clear_custom_hours(path, "a") is True
    assert clear_custom_hours(path, "a") is False
    assert load_custom_hours(path) == {"b": 2.0}


def test_clear_without_file(tmp_path) -> None:
    assert clear_custom_hours(tmp_path / "hours.json", "a") is False


@pytest.mark.parametrize(
    "content,message",
    [
        ("{not json", "not valid JSON"),
        ("[1, 2]", "must contain a JSON object"),
        ('{"a": "lots"}', "non-numeric"),
        ('{"a": null}', "non-numeric"),
    ],
)
def test_malformed_file(tmp_path, content: str, message: str) -> None:
    path = tmp_path / "hours.json"
    path.write_text(content)

    with pytest.raises(ValueError, match=message):
        load_custom_hours(path)


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "hours.json"
    save_custom_hours(path, "a", 1)

    def broken_dump(obj, fp, **kwargs):
        fp.write('{"a')
        raise OSError("disk full")

    monkeypatch.setattr("study_planner.overrides.json.dump", broken_dump)

    with pytest.raises(OSError, match="disk full"):
        save_custom_hours(path, "b", 2)
    assert load_custom_hours(path) == {"a": 1.0}
    assert list(tmp_path.glob("*.tmp")) == []
