import pytest

from jotpad.document import (
    APP_NAME,
    ENCODINGS,
    Document,
    position_label,
    resolve_encoding,
    wheel_zoom,
    window_title,
    zoom_in,
    zoom_out,
)


def test_resolve_known_encodings_round_trip():
    for name in ENCODINGS:
        codec = resolve_encoding(name)
        assert "héllo".encode(codec).decode(codec) == "héllo"


def test_resolve_unknown_falls_back_to_utf8():
    assert resolve_encoding("GBK") == resolve_encoding("UTF-8")


def test_resolve_utf16le_has_no_bom():
    assert "hi".encode(resolve_encoding("UTF-16LE")) == b"h\x00i\x00"


def test_zoom_round_trip():
    assert zoom_out(zoom_in(8)) == 8
    assert zoom_in(8) > 8
    assert zoom_out(8) < 8


def test_zoom_unknown_size_unchanged():
    assert zoom_in(-1) == -1
    assert zoom_out(-1) == -1


def test_zoom_out_never_reaches_zero():
    assert zoom_out(2) == 2
    assert zoom_out(1) == 1


def test_wheel_without_ctrl_not_consumed():
    assert wheel_zoom(10, 120, False) == (10, False)


def test_wheel_with_ctrl():
    assert wheel_zoom(10, 120, True) == (zoom_in(10), True)
    assert wheel_zoom(10, -120, True) == (zoom_out(10), True)
    assert wheel_zoom(10, 0, True) == (10, True)


def test_position_label():
    assert position_label(0, 0) == "行号:1,列号:1  "
    assert position_label(4, 9).startswith("行号:5,列号:10")


def test_window_title():
    assert window_title(None) == APP_NAME
    assert window_title("a.txt") == "a.txt-" + APP_NAME


def test_open_reads_lines(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("one\ntwo\n", encoding="utf-8")
    doc = Document()
    assert doc.open([target], "UTF-8") == "one\ntwo"
    assert doc.is_open
    assert doc.title == window_title(str(target))


def test_open_multiple_files_joins_text(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("alpha\n", encoding="utf-8")
    second.write_text("beta", encoding="utf-8")
    doc = Document()
    assert doc.open([first, second], "UTF-8") == "alpha\nbeta"
    assert doc.path == second


def test_open_skips_unopenable_and_creates_missing(tmp_path):
    created = tmp_path / "new.txt"
    bad = tmp_path / "nodir" / "x.txt"
    doc = Document()
    assert doc.open([bad, created], "UTF-8") == ""
    assert created.exists()
    assert doc.path == created


def test_open_with_no_paths_leaves_document_closed():
    doc = Document()
    assert doc.open([], "UTF-8") == ""
    assert not doc.is_open


def test_open_utf16le(tmp_path):
    target = tmp_path / "w.txt"
    target.write_bytes("héllo\nwörld".encode("utf-16-le"))
    doc = Document()
    assert doc.open([target], "UTF-16LE") == "héllo\nwörld"


def test_reload_with_new_encoding(tmp_path):
    target = tmp_path / "w.txt"
    target.write_bytes("abc".encode(resolve_encoding("UTF-16BE")))
    doc = Document()
    first = doc.open([target], "UTF-8")
    assert first != "abc"
    assert doc.reload("UTF-16BE") == "abc"


def test_reload_when_closed_is_empty():
    assert Document().reload("UTF-8") == ""


def test_save_without_path_raises():
    with pytest.raises(ValueError):
        Document().save("text", "UTF-8")


def test_save_appends(tmp_path):
    target = tmp_path / "out.txt"
    doc = Document()
    doc.save("first", "UTF-8", target)
    doc.save("second", "UTF-8", tmp_path / "ignored.txt")
    assert target.read_text(encoding="utf-8") == "firstsecond"
    assert not (tmp_path / "ignored.txt").exists()
    assert doc.reload("UTF-8") == ""


def test_save_to_open_file_appends(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("x\n", encoding="utf-8")
    doc = Document()
    doc.open([target], "UTF-8")
    doc.save("y", "UTF-8")
    assert doc.reload("UTF-8") == "x\ny"


def test_close_and_prompt(tmp_path):
    target = tmp_path / "a.txt"
    doc = Document()
    assert not doc.needs_prompt("")
    assert doc.needs_prompt(" ")
    doc.open([target], "UTF-8")
    assert doc.needs_prompt("")
    doc.close()
    assert not doc.is_open
    assert doc.title == APP_NAME