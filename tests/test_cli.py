import io

from pimatch.cli import main


def _run(argv, text):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(text), stdout=stdout)
    return code, stdout.getvalue()


def test_session_until_sentinel():
    code, output = _run([], "1\né\nQ\nignored\n")
    assert code == 0
    assert "Enter text to compress (Q to quit): " in output
    assert "Pi[0] (1 bytes)" in output
    assert "Round trip OK (1 bytes -> 1 segments)" in output
    assert "Raw[0xC3] Raw[0xA9]" in output
    assert "ignored" not in output


def test_session_ends_on_eof():
    code, output = _run(["--search", "index"], "hello\n")
    assert code == 0
    assert "Round trip OK (5 bytes -> " in output


def test_custom_sentinel_and_dictionary(tmp_path):
    path = tmp_path / "digits.txt"
    path.write_text("0000414200\n", encoding="utf-8")
    code, output = _run(["-d", str(path), "--quit", "exit"], "AB\nexit\n")
    assert code == 0
    assert "(exit to quit)" in output
    assert "Pi[4] (2 bytes)" in output
    assert "Round trip OK (2 bytes -> 1 segments)" in output


def test_missing_dictionary(tmp_path):
    code, output = _run(["-d", str(tmp_path / "missing.txt")], "")
    assert code == 1
    assert "cannot read dictionary" in output


def test_bad_dictionary(tmp_path):
    path = tmp_path / "digits.txt"
    path.write_text("31x4", encoding="utf-8")
    code, output = _run(["-d", str(path)], "")
    assert code == 1
    assert "Error loading dictionary" in output
