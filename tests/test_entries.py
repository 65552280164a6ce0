"""Tests for amenu.entries."""

from pathlib import Path

import pytest

from amenu.entries import EntryStore, load_entries, parse_entries


class TestParseEntries:
    def test_splits_on_first_colon_and_trims(self) -> None:
        entries = parse_entries(["  Url :  https://example.com:8080/x  "])
        assert entries == {"Url": "https://example.com:8080/x"}

    def test_skips_lines_without_colon_and_blank_lines(self) -> None:
        entries = parse_entries(["no separator here", "", "   ", "Key: value"])
        assert entries == {"Key": "value"}

    def test_last_duplicate_wins(self) -> None:
        entries = parse_entries(["Key: first", "Key: second"])
        assert entries == {"Key": "second"}

    def test_empty_value_is_kept(self) -> None:
        assert parse_entries(["Blank:"]) == {"Blank": ""}


class TestEntryStore:
    def test_all_names_covers_every_key(self, store: EntryStore) -> None:
        assert sorted(store.all_names) == ["Farewell", "Greeting", "Grocery list"]
        assert len(store) == 3

    def test_content_for(self, store: EntryStore) -> None:
        assert store.content_for("Greeting") == "Hello there"
        with pytest.raises(KeyError):
            store.content_for("Missing")

    def test_entries_are_read_only(self, store: EntryStore) -> None:
        with pytest.raises(TypeError):
            store.entries["New"] = "value"  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self) -> None:
        source = {"A": "1"}
        store = EntryStore(source)
        source["B"] = "2"
        assert "B" not in store
        assert store.all_names == ("A",)

    def test_empty_store_is_falsy(self) -> None:
        empty = EntryStore.empty()
        assert not empty
        assert empty.all_names == ()


class TestLoadEntries:
    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prompts"
        path.write_text("Greeting: Hello there\nFarewell: Goodbye now\n", encoding="utf-8")
        store = load_entries(path)
        assert store.content_for("Greeting") == "Hello there"
        assert store.content_for("Farewell") == "Goodbye now"

    def test_missing_file_gives_empty_store(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        store = load_entries(tmp_path / "nope")
        assert len(store) == 0
        assert "[Amenu] Could not open file" in capsys.readouterr().err

    def test_directory_gives_empty_store(self, tmp_path: Path) -> None:
        assert len(load_entries(tmp_path)) == 0

    def test_undecodable_bytes_do_not_abort_load(self, tmp_path: Path) -> None:
        path = tmp_path / "prompts"
        path.write_bytes(b"Bad: \xff\xfe\nGood: fine\n")
        store = load_entries(path)
        assert store.content_for("Good") == "fine"
        assert "Bad" in store

    def test_debug_output(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "prompts"
        path.write_text("a: 1\nb: 2\nc: 3\nd: 4\n", encoding="utf-8")
        load_entries(path, debug=True)
        err = capsys.readouterr().err
        assert "Current working dir" in err
        assert "Reading line 2: 'c: 3'" in err
        assert "Reading line 3" not in err
        assert "Total loaded entries: 4" in err

    def test_quiet_without_debug(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "prompts"
        path.write_text("a: 1\n", encoding="utf-8")
        load_entries(path)
        assert capsys.readouterr().err == ""

    def test_only_newline_ends_an_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "prompts"
        path.write_bytes(
            "Sig: Regards\x0cJane\r\nPara: one two\x85three\nTab: a\x0bb\n".encode("utf-8")
        )
        store = load_entries(path)
        assert store.content_for("Sig") == "Regards\x0cJane"
        assert store.content_for("Para") == "one two\x85three"
        assert store.content_for("Tab") == "a\x0bb"
        assert len(store) == 3

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "prompts"
        path.write_bytes(b"A: 1\r\nB: 2\r\n")
        store = load_entries(path)
        assert store.content_for("A") == "1"
        assert store.content_for("B") == "2"
