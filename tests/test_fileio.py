import pytest

from nocturne.fileio import file_exists, read_file


def test_read_file_round_trip(tmp_path):
    target = tmp_path / "list.txt"
    text = "abcdefghijk First song\nlmnopqrstuv 日本語\n"
    target.write_bytes(text.encode("utf-8"))
    assert read_file(target) == text


def test_read_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert read_file(target) == ""


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_file_exists(tmp_path):
    target = tmp_path / "present.bin"
    assert file_exists(target) is False
    target.write_bytes(b"x")
    assert file_exists(target) is True
    assert file_exists(str(target)) is True