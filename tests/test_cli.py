from __future__ import annotations

import pytest

from number_pairing.cli import main


def test_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Best Result: " in out
    assert "Best Number Combination:" in out
    assert "Other Top Results:" in out


def test_custom_sum_without_other(capsys):
    assert main(["--sum", "12.5", "--no-other"]) == 0
    out = capsys.readouterr().out
    assert "-> 12.5 (difference:" in out
    assert "Other Top Results" not in out


def test_verbose_prints_rounds(capsys):
    assert main(["--verbose", "--max-other", "3"]) == 0
    out = capsys.readouterr().out
    assert "round  1 + [0, 4] step 2" in out


def test_round_cap_flag(capsys):
    assert main(["--max-rounds", "1"]) == 0
    out = capsys.readouterr().out
    assert "(Solved in 1 run)" in out
    assert "2 and 6 -> 8" in out


@pytest.mark.parametrize("argv", [["--sum=-1"], ["--max-rounds", "0"], ["--sum", "eight"]])
def test_rejects_bad_input(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
