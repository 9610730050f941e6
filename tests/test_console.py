import io

import pytest

from recursia.console import make_file_selection, make_selection_from


def _run(options, answers, title="Pick one"):
    stdin = io.StringIO(answers)
    stdout = io.StringIO()
    result = make_selection_from(title, options, stdin, stdout)
    return result, stdout.getvalue()


def test_valid_choice_is_returned():
    result, _ = _run(["alpha", "beta", "gamma"], "1\n")
    assert result == 1


def test_options_are_listed_with_indices():
    _, output = _run(["alpha", "beta"], "0\n", title="Menu")
    lines = output.splitlines()
    assert lines[0] == "Menu"
    assert lines[1] == "0 alpha"
    assert lines[2].startswith("1 beta")


def test_out_of_range_reprompts():
    result, output = _run(["alpha", "beta"], "5\n-1\n1\n")
    assert result == 1
    assert output.count("Please enter a number between 0 and 1") == 2


def test_non_integer_reprompts():
    result, output = _run(["alpha", "beta"], "abc\n0\n")
    assert result == 0
    assert output.count("Your choice: ") == 2


def test_empty_options_raise():
    with pytest.raises(ValueError):
        make_selection_from("t", [], io.StringIO("0\n"), io.StringIO())


def test_eof_raises():
    with pytest.raises(EOFError):
        make_selection_from("t", ["a"], io.StringIO(""), io.StringIO())


def test_file_selection_filters_by_suffix(tmp_path):
    for name in ("b.txt", "a.txt", "c.dat"):
        (tmp_path / name).write_text("x")
    stdout = io.StringIO()
    result = make_file_selection(".txt", str(tmp_path), io.StringIO("1\n"), stdout)
    assert result == str(tmp_path) + "/b.txt"
    assert "c.dat" not in stdout.getvalue()


def test_file_selection_keeps_trailing_slash(tmp_path):
    (tmp_path / "only.txt").write_text("x")
    directory = str(tmp_path) + "/"
    result = make_file_selection(".txt", directory, io.StringIO("0\n"), io.StringIO())
    assert result == directory + "only.txt"


def test_file_selection_empty_directory_means_current(tmp_path, monkeypatch):
    (tmp_path / "demo.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    result = make_file_selection(".txt", "", io.StringIO("0\n"), io.StringIO())
    assert result == "./demo.txt"


def test_file_selection_with_no_matches_raises(tmp_path):
    (tmp_path / "a.dat").write_text("x")
    with pytest.raises(ValueError):
        make_file_selection(".txt", str(tmp_path), io.StringIO("0\n"), io.StringIO())