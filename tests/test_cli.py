"""
test_cli.py — Tests for the pairalign command-line front end
"""

import pytest

from pairalign.cli import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert (args.seq1, args.seq2) == ("GAATTC", "GATTA")
    assert args.mode == "global"
    assert (args.match, args.mismatch, args.gap) == (1, -1, -1)
    assert args.matrix == "none"


def test_global_output(capsys):
    assert main(["AC", "A"]) == 0
    out = capsys.readouterr().out
    assert "Score: 0" in out
    assert "Optimal alignments: 1" in out
    assert "AC\nA-" in out
    assert "Using" not in out


def test_local_with_matrix(capsys):
    assert main(["HEAGAWGHEE", "PAWHEAE", "--mode", "local", "--matrix", "BLOSUM50", "--gap", "-8"]) == 0
    out = capsys.readouterr().out
    assert "Using BLOSUM50 for scoring." in out
    assert "Score:" in out


def test_show_matrix(capsys):
    main(["AC", "A", "--show-matrix"])
    out = capsys.readouterr().out
    assert "1⇖" in out
    assert "0⇑" in out


def test_bad_mode():
    with pytest.raises(SystemExit):
        main(["AC", "A", "--mode", "semiglobal"])


def test_dag_requires_plot():
    with pytest.raises(SystemExit):
        main(["AC", "A", "--dag"])


@pytest.mark.parametrize("dag", [False, True])
def test_plot_written(tmp_path, dag, capsys):
    pytest.importorskip("matplotlib")
    pytest.importorskip("seaborn")
    path = tmp_path / "out.png"
    argv = ["GAATTC", "GATTA", "--plot", str(path)] + (["--dag"] if dag else [])
    assert main(argv) == 0
    assert path.exists()
    assert path.stat().st_size > 0
