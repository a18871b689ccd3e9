import io
import os

import pytest

from yt_transcriber.errors import FileWriteError
from yt_transcriber.utils.output import write_output


def test_writes_to_stream_when_no_path():
    buf = io.StringIO()
    write_output("hello\n", stream=buf)
    assert buf.getvalue() == "hello\n"


def test_writes_file_utf8(tmp_path):
    target = tmp_path / "out.txt"
    write_output("héllo wörld\n", str(target))
    assert target.read_text(encoding="utf-8") == "héllo wörld\n"
    assert os.listdir(tmp_path) == ["out.txt"]


def test_overwrites_existing_file(tmp_path):
    target = tmp_path / "out.srt"
    target.write_text("old", encoding="utf-8")
    write_output("new", str(target))
    assert target.read_text(encoding="utf-8") == "new"


def test_missing_directory_raises(tmp_path):
    target = tmp_path / "missing" / "out.txt"
    with pytest.raises(FileWriteError):
        write_output("data", str(target))
    assert not target.exists()


def test_directory_target_is_left_untouched(tmp_path):
    target = tmp_path / "adir"
    target.mkdir()
    (target / "keep").write_text("x")
    with pytest.raises(FileWriteError):
        write_output("data", str(target))
    assert target.is_dir()
    assert sorted(os.listdir(tmp_path)) == ["adir"]
