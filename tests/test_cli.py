"""
Smoke tests for the command line entry point.
"""

from corners.core.definitions import CORNER_NAMES
from corners.pipeline import generate_puzzle

from main import main, parse_presses


def test_solve_prints_solution(capsys):
    assert main(['--seed', '0', '--serial-digit', '7', '--solve']) == 0
    out = capsys.readouterr().out
    _, puzzle = generate_puzzle(0, 7)
    assert f"Solution: {puzzle.describe()}" in out
    assert out.startswith("Clamps: ")


def test_show_maze(capsys):
    assert main(['--seed', '3', '--serial-digit', '1', '--show-maze']) == 0
    assert '[' in capsys.readouterr().out


def test_show_maze_prints_tag_grids(capsys):
    assert main(['--seed', '0', '--serial-digit', '7', '--show-maze']) == 0
    out = capsys.readouterr().out
    assert "Serial digits:\n[[8 9 5 0]\n [3 6 4 7]" in out
    assert "Corner colours:" in out


def test_correct_presses_solve(capsys):
    _, puzzle = generate_puzzle(4, 2)
    presses = ','.join(CORNER_NAMES[c] for c in puzzle.solution)
    assert main(['--seed', '4', '--serial-digit', '2', '--presses', presses]) == 0
    out = capsys.readouterr().out
    assert "Module solved." in out
    assert "Strikes: 0, solved: True" in out


def test_duplicate_press_strikes(capsys):
    assert main(['--seed', '4', '--serial-digit', '2', '--presses', 'TL,TL']) == 1
    assert "a second time" in capsys.readouterr().out


def test_invalid_input_fails_setup():
    assert main(['--seed', '0', '--serial-digit', '12']) == 2
    assert main(['--seed', '0', '--serial-digit', '1', '--presses', 'XX']) == 2


def test_parse_presses():
    assert parse_presses('TL, br,3, tr') == [0, 2, 3, 1]
