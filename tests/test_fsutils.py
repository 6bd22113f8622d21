import io
import os

import pytest

from voxutil.fsutils import file_exists, path_delim, path_join, read_all_bytes


def test_path_delim_matches_os():
    assert path_delim() == os.sep


def test_path_join_uses_delimiter_and_str():
    d = path_delim()
    assert path_join("a", "b") == "a" + d + "b"
    assert path_join("dir", 3) == "dir" + d + "3"
    assert path_join("only") == "only"


def test_read_all_bytes_round_trip(tmp_path):
    data = bytes(range(256))
    target = tmp_path / "blob.bin"
    target.write_bytes(data)
    assert read_all_bytes(str(target)) == data


def test_read_all_bytes_empty(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert read_all_bytes(target) == b""


def test_read_all_bytes_from_stream():
    stream = io.BytesIO(b"payload")
    stream.read(3)
    assert read_all_bytes(stream) == b"payload"


def test_read_all_bytes_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_all_bytes(tmp_path / "nope")


def test_file_exists(tmp_path):
    target = tmp_path / "f.txt"
    assert not file_exists(target)
    target.write_text("x")
    assert file_exists(target)
    assert not file_exists(tmp_path)