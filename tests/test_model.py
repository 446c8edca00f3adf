"""Test module for the entry and table model."""

from __future__ import annotations

from stringsfile_py.core import Entry, StringsFile


def test_strings_file_starts_empty():
    sf = StringsFile()
    assert len(sf) == 0
    assert list(sf) == []


def test_strings_file_sequence_operations():
    """Verify append/insert/index/assign/delete keep caller order."""
    sf = StringsFile()
    sf.append(Entry("b", "2"))
    sf.insert(0, Entry("a", "1"))
    sf.append(Entry("c", "3", "note"))
    assert sf.keys() == ["a", "b", "c"]
    assert sf[-1].comment == "note"
    assert sf[0:2] == [Entry("a", "1"), Entry("b", "2")]

    sf[1] = Entry("B", "two")
    del sf[0]
    assert sf.keys() == ["B", "c"]


def test_entries_are_mutable_in_place():
    sf = StringsFile([Entry("k", "v")])
    sf[0].value = "changed"
    assert sf.entries[0] == Entry("k", "changed", None)


def test_empty_comment_differs_from_missing_comment():
    assert Entry("k", "v", "") != Entry("k", "v", None)


def test_get_entry_returns_first_duplicate():
    sf = StringsFile([Entry("k", "1"), Entry("k", "2")])
    assert sf.get_entry("k") == Entry("k", "1")
    assert sf.get_entry("missing") is None
    assert len(sf) == 2


def test_strings_file_equality_is_structural():
    assert StringsFile([Entry("k", "v")]) == StringsFile([Entry("k", "v")])
    assert StringsFile([Entry("k", "v")]) != StringsFile([Entry("v", "k")])
    assert StringsFile() != []
