from pathlib import Path

import pytest

from yaml2env.envfile import merge_entries, serialize_env, write_env_file
from yaml2env.errors import OutputWriteError


def test_merge_last_write_wins_across_files_and_lines():
    merged = merge_entries(
        [
            [("A", "1"), ("B", "2"), ("A", "3")],
            [("B", "4")],
        ]
    )

    assert merged == {"A": "3", "B": "4"}


def test_merge_same_pair_twice_yields_one_entry():
    assert merge_entries([[("A", "1")], [("A", "1")]]) == {"A": "1"}


def test_merge_keeps_untrimmed_keys_distinct():
    assert merge_entries([[("A", "1"), (" A", "2")]]) == {"A": "1", " A": "2"}


def test_merge_nothing():
    assert merge_entries([]) == {}
    assert merge_entries([[], []]) == {}


def test_serialize_trims_keys_and_values():
    assert serialize_env({" A ": " b "}) == "A=b\n"


def test_serialize_follows_mapping_order():
    assert serialize_env({"Z": "1", "A": "2"}) == "Z=1\nA=2\n"


def test_serialize_sorted_by_trimmed_key():
    env = {"Z": "1", " B": "2", "A": "3"}

    assert serialize_env(env, sort_keys=True) == "A=3\nB=2\nZ=1\n"


def test_serialize_empty_mapping():
    assert serialize_env({}) == ""


def test_write_env_file_truncates_existing(tmp_path: Path):
    output = tmp_path / ".env"
    output.write_text("OLD=value\nOTHER=1\n", encoding="utf-8")

    write_env_file(output, "NEW=1\n")

    assert output.read_text(encoding="utf-8") == "NEW=1\n"


def test_write_env_file_missing_directory(tmp_path: Path):
    output = tmp_path / "missing" / ".env"

    with pytest.raises(OutputWriteError) as exc_info:
        write_env_file(output, "A=1\n")

    assert exc_info.value.path == output
    assert str(output) in exc_info.value.message
