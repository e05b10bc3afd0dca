import pytest

from catfarm.utils import create_file, create_folder


def test_create_file_makes_empty_file(tmp_path):
    target = tmp_path / "save.catfam"
    create_file(target)
    assert target.is_file()
    assert target.read_bytes() == b""


def test_create_file_truncates_existing(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"old content")
    create_file(str(target))
    assert target.read_bytes() == b""


def test_create_folder_creates_directory(tmp_path):
    target = tmp_path / "Storage"
    create_folder(target)
    assert target.is_dir()


def test_create_folder_accepts_existing_directory(tmp_path):
    target = tmp_path / "Storage"
    create_folder(target)
    (target / "keep.txt").write_text("x")
    create_folder(target)
    assert (target / "keep.txt").read_text() == "x"


def test_create_folder_missing_parent_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_folder(tmp_path / "missing" / "child")


def test_create_folder_over_file_fails(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(FileExistsError):
        create_folder(target)