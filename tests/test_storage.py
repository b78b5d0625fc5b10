import pytest

from listmaker.models import list_path
from listmaker.storage import read_file, write_file


def test_round_trip(tmp_path):
    path = str(tmp_path / "groceries.txt")
    items = ["milk", "eggs", "milk", "bread and butter"]
    write_file(path, items)
    assert read_file(path) == items


def test_write_creates_directory(tmp_path):
    path = str(tmp_path / "nested" / "deeper" / "list.txt")
    write_file(path, ["one"])
    assert read_file(path) == ["one"]


def test_read_skips_blank_lines_and_trims(tmp_path):
    path = tmp_path / "messy.txt"
    path.write_text("  first \n\n   \nsecond\n", encoding="utf-8")
    assert read_file(str(path)) == ["first", "second"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(str(tmp_path / "nope.txt"))


def test_list_path_appends_suffix_once(tmp_path):
    d = str(tmp_path)
    assert list_path("todo", d) == str(tmp_path / "todo.txt")
    assert list_path("todo.txt", d) == str(tmp_path / "todo.txt")


def test_read_non_utf8_raises_oserror(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(OSError):
        read_file(str(path))


def test_unencodable_write_leaves_file_untouched(tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("old\n", encoding="utf-8")
    with pytest.raises(OSError):
        write_file(str(path), ["ok", "bad\udce9"])
    assert path.read_bytes() == b"old\n"
