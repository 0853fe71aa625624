from pathlib import Path

from logfile.writer import LineWriter, ensure_dir


def test_line_writer_appends_and_creates(tmp_path: Path):
    target = tmp_path / "out.log"
    writer = LineWriter(str(target))
    writer.write("one \r\n")
    writer.write("two \r\n")
    assert target.read_bytes() == b"one \r\ntwo \r\n"


def test_line_writer_utf8(tmp_path: Path):
    target = tmp_path / "emoji.log"
    LineWriter(str(target)).write("🟥 [x] boom \r\n")
    assert target.read_bytes().decode("utf-8") == "🟥 [x] boom \r\n"


def test_ensure_dir_nested(tmp_path: Path):
    nested = tmp_path / "a" / "b"
    assert ensure_dir(str(nested)) == str(nested)
    assert nested.is_dir()
    # Idempotent
    ensure_dir(str(nested))
