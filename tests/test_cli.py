from typer.testing import CliRunner

from textgen.cli.main import app

runner = CliRunner()


def _corpus(tmp_path, text="abcabcabc"):
    p = tmp_path / "corpus.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_generate_fixed(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "fixed", _corpus(tmp_path)])
    assert result.exit_code == 0
    assert result.stdout == "abcabcab\n"


def test_fixed_is_reproducible(tmp_path):
    path = _corpus(tmp_path, "she sells sea shells by the sea shore. " * 5)
    a = runner.invoke(app, ["2", "sh", "80", "fixed", path])
    b = runner.invoke(app, ["2", "sh", "80", "fixed", path])
    assert a.exit_code == 0
    assert a.stdout == b.stdout


def test_random_mode(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "random", _corpus(tmp_path)])
    assert result.exit_code == 0
    # the cyclic corpus leaves a single choice per window
    assert result.stdout == "abcabcab\n"


def test_short_seed(tmp_path):
    result = runner.invoke(app, ["3", "ab", "5", "fixed", _corpus(tmp_path)])
    assert result.exit_code == 0
    assert result.stdout == "ab\n"


def test_missing_arguments(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "fixed"])
    assert result.exit_code != 0
    assert "Usage" in result.output


def test_extra_arguments(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "fixed", _corpus(tmp_path), "more"])
    assert result.exit_code != 0
    assert "Usage" in result.output


def test_bad_mode(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "sometimes", _corpus(tmp_path)])
    assert result.exit_code != 0


def test_bad_window_length(tmp_path):
    result = runner.invoke(app, ["0", "abc", "5", "fixed", _corpus(tmp_path)])
    assert result.exit_code != 0


def test_missing_corpus(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "fixed", str(tmp_path / "none.txt")])
    assert result.exit_code != 0


def test_dump_and_stats(tmp_path):
    result = runner.invoke(app, ["3", "abc", "5", "fixed", _corpus(tmp_path), "--dump", "--stats"])
    assert result.exit_code == 0
    assert "abc : (a 2 1.0 1.0)" in result.output
    assert '"windows":3' in result.output


def test_seed_starting_with_dash(tmp_path):
    path = _corpus(tmp_path, "-ab-ab-ab")
    result = runner.invoke(app, ["--", "3", "-ab", "3", "fixed", path])
    assert result.exit_code == 0
    assert result.stdout == "-ab-ab\n"
