import io
import sys

import pytest

from ordkit.interface.cli import main as cli
from ordkit.interface.cli.main import field_extractor, main

LINES = "pear 3\nApple 10\nfig 2\napple 10\n"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda settings: None)


def run(monkeypatch, capsys, argv, stdin=LINES):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    code = main(argv)
    out, err = capsys.readouterr()
    return code, out.splitlines(), err


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: ordkit" in capsys.readouterr().out


def test_sort_by_code_point(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["sort", "--by", "code"])
    assert code == 0
    assert out == ["Apple 10", "apple 10", "fig 2", "pear 3"]


def test_sort_numeric_field_reversed(monkeypatch, capsys):
    code, out, _ = run(
        monkeypatch, capsys, ["sort", "--field", "2", "--by", "number", "--reverse"]
    )
    assert code == 0
    # Ties keep input order (sorted is stable)
    assert out == ["Apple 10", "apple 10", "pear 3", "fig 2"]


def test_sort_with_tiebreak(monkeypatch, capsys):
    code, out, _ = run(
        monkeypatch,
        capsys,
        ["sort", "--field", "2", "--by", "number", "--reverse", "--stable-tiebreak"],
        stdin="apple 10\nApple 10\nfig 2\n",
    )
    assert code == 0
    assert out == ["Apple 10", "apple 10", "fig 2"]


def test_sort_by_rank(monkeypatch, capsys):
    code, out, _ = run(
        monkeypatch,
        capsys,
        ["sort", "--field", "1", "--delimiter", ",", "--rank", "low,mid,high"],
        stdin="high,a\nlow,b\nother,c\nmid,d\n",
    )
    assert code == 0
    assert out == ["other,c", "low,b", "mid,d", "high,a"]


def test_sort_reads_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "in.txt"
    path.write_text("b\nc\na\n", encoding="utf-8")
    code, out, _ = run(monkeypatch, capsys, ["sort", "--by", "code", str(path)], stdin="")
    assert code == 0
    assert out == ["a", "b", "c"]


def test_sort_invalid_number_exits_2(monkeypatch, capsys):
    code, out, err = run(
        monkeypatch, capsys, ["sort", "--by", "number"], stdin="1\ntwo\n3\n"
    )
    assert code == 2
    assert out == []
    assert "not a number: 'two'" in err


def test_sort_missing_file_exits_2(tmp_path, monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["sort", str(tmp_path / "missing.txt")])
    assert code == 2
    assert "Error" in err


def test_sort_unknown_lookup_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("ORDKIT_RANK_LOOKUP", "btree")
    code, _, err = run(monkeypatch, capsys, ["sort", "--rank", "a,b"])
    assert code == 2
    assert "btree" in err


def test_explain_describes_composition(monkeypatch, capsys):
    monkeypatch.setenv("ORDKIT_RANK_LOOKUP", "table")
    code, out, _ = run(
        monkeypatch, capsys, ["explain", "--field", "2", "--rank", "x,y", "--reverse"]
    )
    assert code == 0
    assert out == [
        "ordering(reversed(keyed(field_extractor.<locals>.line_field, ranking(table[2]))))"
    ]


def test_explain_with_tiebreak(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["explain", "--by", "code", "--stable-tiebreak"])
    assert code == 0
    assert out == ["ordering(join(keyed(str, by_code_unit), by_code_unit))"]


def test_field_must_be_positive(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["sort", "--field", "0"])
    assert exc.value.code == 2


def test_field_extractor():
    assert field_extractor(None, None)("a b") == "a b"
    assert field_extractor(2, None)("a  b c") == "b"
    assert field_extractor(3, ",")("a,b") == ""
