from scripts.solve_board import main


def _dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("cat\ncats\nbone\nbones\nrepo\nzzz\n", encoding="utf-8")
    return str(path)


def test_prints_ranked_words(tmp_path, capsys):
    code = main(["CATS REPO BONE DIGS", "--dictionary", _dictionary(tmp_path), "--min-len", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Board 4x4:" in out
    assert "--- 5 words (showing 5) ---" in out
    assert out.index("bones") < out.index("cat")
    assert "zzz" not in out


def test_check_reports_paths(tmp_path, capsys):
    code = main(["CATS REPO BONE DIGS", "--dictionary", _dictionary(tmp_path), "--check", "cats"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Status: valid" in out
    assert "In dictionary: yes" in out
    assert "path [0, 1, 2, 3]" in out


def test_check_reports_partial(tmp_path, capsys):
    code = main(["CATS REPO BONE DIGS", "--dictionary", _dictionary(tmp_path), "--check", "catz"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Status: invalid" in out
    assert "Traceable up to 'cat' via [0, 1, 2]" in out


def test_bad_shape(tmp_path, capsys):
    code = main(["ABCDE", "--dictionary", _dictionary(tmp_path)])
    assert code == 1
    assert "Error:" in capsys.readouterr().out


def test_missing_dictionary(tmp_path, capsys):
    code = main(["ABCD", "--dictionary", str(tmp_path / "nope.txt")])
    assert code == 1
    assert "not found" in capsys.readouterr().out


def test_timings_line_lists_stages(tmp_path, capsys):
    code = main(["CATS REPO BONE DIGS", "--dictionary", _dictionary(tmp_path), "--check", "cat"])
    out = capsys.readouterr().out
    assert code == 0
    timings = [line for line in out.splitlines() if line.startswith("Timings (ms): ")]
    assert len(timings) == 1
    for name in ("load_dictionary=", "solve=", "validate=", "total="):
        assert name in timings[0]
