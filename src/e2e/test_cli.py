import json
from pathlib import Path

import pytest

from anagrams.__main__ import main


def _seed(tmp: Path) -> str:
    p = tmp / "words.txt"
    p.write_text("eat\nate\ntea\nI\nlove\nyou\nolive\n", encoding="utf-8")
    return str(p)


@pytest.mark.e2e
def test_cli_json_sentence_query(tmp_path: Path, capsys):
    rc = main(["--dictionary", _seed(tmp_path), "--q", "you olive", "-k", "0", "--json"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert ["I", "love", "you"] in rows
    assert len(rows) == 8


@pytest.mark.e2e
def test_cli_word_query_table(tmp_path: Path, capsys):
    rc = main(["--dictionary", _seed(tmp_path), "--word", "eat"])
    assert rc == 0
    out = capsys.readouterr().out
    for w in ("eat", "ate", "tea"):
        assert w in out


@pytest.mark.e2e
def test_cli_no_anagrams(tmp_path: Path, capsys):
    main(["--dictionary", _seed(tmp_path), "--q", "xyz"])
    assert "(no anagrams)" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_build_cache_then_load(tmp_path: Path, capsys):
    cache = str(tmp_path / "idx.pkl")
    assert main(["--dictionary", _seed(tmp_path), "--cache", cache]) == 0
    capsys.readouterr()
    assert main(["--load", "--cache", cache, "--word", "tea", "--json"]) == 0
    assert sorted(json.loads(capsys.readouterr().out)) == ["ate", "eat", "tea"]


def test_cli_missing_dictionary(tmp_path: Path, capsys):
    rc = main(["--dictionary", str(tmp_path / "missing.txt"), "--q", "eat"])
    assert rc == 2
    assert "error:" in capsys.readouterr().err
