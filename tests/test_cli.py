# tests/test_cli.py - CLI smoke checks
import pytest

from metric_bktree.cli.cli import main


@pytest.fixture
def words(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("book\nbooks\n\nnook\nnooks\nb\nboo\nbo\nbookies\n", encoding="utf-8")
    return p


def run(tmp_path, *argv):
    return main(["--log-file", str(tmp_path / "cli.log"), *argv])


def test_search_prints_matches(tmp_path, words, capsys):
    assert run(tmp_path, "search", str(words), "hook", "-d", "1", "-m", "length") == 0
    out = capsys.readouterr().out
    for w in ("book", "nook", "books", "nooks", "boo"):
        assert w in out
    assert "bookies" not in out
    assert "5 matches" in (tmp_path / "cli.log").read_text()


def test_search_uses_config_defaults(tmp_path, words, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"metric": "length", "max_distance": 0, "show_tree": true}')
    assert run(tmp_path, "--config", str(cfg), "search", str(words), "hook") == 0
    out = capsys.readouterr().out
    # rich may wrap the table title, so compare with whitespace collapsed
    assert "(d <= 0)" in " ".join(out.split())
    assert "BK-tree" in out
    assert "2 matches for 'hook'" in (tmp_path / "cli.log").read_text()


def test_search_no_matches(tmp_path, words, capsys):
    assert run(tmp_path, "search", str(words), "zzzzzzzzzzzzzz", "-d", "0") == 0
    assert "no matches" in capsys.readouterr().out


def test_show_prints_tree(tmp_path, words, capsys):
    assert run(tmp_path, "show", str(words), "-m", "length") == 0
    out = capsys.readouterr().out
    assert "'bookies'" in out
    assert "8 elements" in out


def test_manhattan_vectors(tmp_path, capsys):
    p = tmp_path / "points.txt"
    p.write_text("0,0\n3,4\n1,1\n", encoding="utf-8")
    assert run(tmp_path, "search", str(p), "0,1", "-d", "1", "-m", "manhattan") == 0
    out = capsys.readouterr().out
    assert "(0, 0)" in out
    assert "(1, 1)" in out
    assert "(3, 4)" not in out


def test_metrics_lists_names(tmp_path, capsys):
    assert run(tmp_path, "metrics") == 0
    out = capsys.readouterr().out
    assert "levenshtein" in out and "hamming" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["search", "missing.txt", "hook"],
        ["search", "WORDS", "hook", "-m", "nope"],
        ["search", "WORDS", "hook", "-d", "-1"],
        ["search", "WORDS", "hook", "-m", "hamming"],
    ],
)
def test_errors_exit_with_1(tmp_path, words, capsys, argv):
    argv = [str(words) if a == "WORDS" else str(tmp_path / a) if a == "missing.txt" else a for a in argv]
    assert run(tmp_path, *argv) == 1
    assert "Error" in capsys.readouterr().out
    assert "ERROR" in (tmp_path / "cli.log").read_text()
