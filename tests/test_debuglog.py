from bookera_scaffold.debuglog import debug_print


def test_debug_print_writes_line(tmp_path):
    log = tmp_path / "debug.txt"
    debug_print("tick", log)
    assert log.read_text(encoding="utf-8") == "tick\n"


def test_debug_print_appends(tmp_path):
    log = tmp_path / "debug.txt"
    debug_print("key", log)
    debug_print("tick", log)
    assert log.read_text(encoding="utf-8").splitlines() == ["key", "tick"]


def test_debug_print_reports_open_error(tmp_path, capsys):
    debug_print("tick", tmp_path)
    captured = capsys.readouterr()
    assert "Error opening file:" in captured.err