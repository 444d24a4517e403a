import hashlib

from tlsdebug.common.protocol import Alert, RecordHeader, UnknownExtension
from tlsdebug.storage.transcript import (
    append_lines, compare, read_lines, render_lines, sha256_of_file,
)

MESSAGES = [
    RecordHeader(record_type=0x15, version=0x0303, len=2),
    Alert(severity=2, code=10),
    UnknownExtension(id=0x44, data=b"\x01\x02"),
]

EXPECTED = [
    "RecordHeader { type: 0x15, version: 0x0303, len: 2 }",
    "Alert { severity: fatal, code: 10 }",
    "Unknown(id=0x44,data=[01 02])",
]

def test_render_lines():
    assert render_lines(MESSAGES) == EXPECTED

def test_append_and_read_back(tmp_path):
    directory = tmp_path / "transcripts"
    path = append_lines(render_lines(MESSAGES), filename="run.log", directory=str(directory))
    assert directory.is_dir()
    assert read_lines(path) == EXPECTED
    assert compare(path, EXPECTED)
    assert not compare(path, EXPECTED[:2])

def test_append_is_cumulative(tmp_path):
    path = append_lines(["one\n"], filename="t.log", directory=str(tmp_path))
    append_lines(["two"], filename="t.log", directory=str(tmp_path))
    assert read_lines(path) == ["one", "two"]

def test_digest_matches_content(tmp_path):
    path = append_lines(EXPECTED, filename="d.log", directory=str(tmp_path))
    content = ("\n".join(EXPECTED) + "\n").encode()
    assert sha256_of_file(path) == hashlib.sha256(content).hexdigest()

def test_same_rendering_gives_same_digest(tmp_path):
    a = append_lines(render_lines(MESSAGES), filename="a.log", directory=str(tmp_path))
    b = append_lines(render_lines(MESSAGES), filename="b.log", directory=str(tmp_path))
    assert sha256_of_file(a) == sha256_of_file(b)

def test_default_directory_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TLSDEBUG_TRANSCRIPT_DIR", str(tmp_path / "env_dir"))
    path = append_lines(["x"], filename="e.log")
    assert path == str(tmp_path / "env_dir" / "e.log")
