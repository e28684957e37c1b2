import os

import pytest

from cpudevices.folders import (
    fopen_no_matter_what,
    is_dir_exist,
    mkdir_recursive,
    remove_directory,
)


def test_mkdir_recursive_creates_nested_directories(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    mkdir_recursive(target)
    assert target.is_dir()


def test_mkdir_recursive_accepts_existing_and_trailing_slash(tmp_path):
    target = tmp_path / "x" / "y"
    mkdir_recursive(str(target) + "/")
    mkdir_recursive(target)
    assert is_dir_exist(target)


def test_mkdir_recursive_fails_when_file_blocks_path(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("data")
    with pytest.raises(OSError):
        mkdir_recursive(blocker / "sub")


def test_fopen_no_matter_what_creates_parents(tmp_path):
    target = tmp_path / "test" / "file" / "path" / "test.txt"
    with fopen_no_matter_what(str(target), "ab") as handle:
        handle.write(b"buffer")
    assert target.read_bytes() == b"buffer"
    assert is_dir_exist(target.parent)


def test_fopen_no_matter_what_without_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with fopen_no_matter_what("plain.txt", "w") as handle:
        assert os.fspath(handle.name) == "plain.txt"
        written = handle.write("hello")
    assert written == 5
    assert handle.closed is True
    assert (tmp_path / "plain.txt").read_text() == "hello"


def test_is_dir_exist_false_for_file_and_missing(tmp_path):
    some_file = tmp_path / "f.txt"
    some_file.write_text("x")
    assert is_dir_exist(some_file) is False
    assert is_dir_exist(tmp_path / "missing") is False
    assert is_dir_exist(tmp_path) is True


def test_remove_directory_removes_tree(tmp_path, capsys):
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "top.txt").write_text("1")
    (root / "sub" / "mid.txt").write_text("2")
    (root / "sub" / "deeper" / "low.txt").write_text("3")

    remove_directory(str(root))

    assert not root.exists()
    out = capsys.readouterr().out
    assert f"remove_directory: removing directory {root}" in out
    assert out.count("remove_directory: removing directory") == 3


def test_remove_directory_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        remove_directory(tmp_path / "nope")


def test_remove_directory_leaves_siblings(tmp_path, capsys):
    doomed = tmp_path / "doomed"
    kept = tmp_path / "kept"
    doomed.mkdir()
    kept.mkdir()
    remove_directory(doomed)
    out = capsys.readouterr().out
    assert out.count("remove_directory: removing directory") == 1
    assert f"remove_directory: removing directory {doomed}" in out
    assert sorted(os.listdir(tmp_path)) == ["kept"]