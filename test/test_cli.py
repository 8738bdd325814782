import pytest

from aoc2025.cli import main, parse_args

GRID_INPUT = "@@@\n@@@\n@@@\n"


@pytest.fixture
def grid_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(GRID_INPUT, encoding="utf-8")
    return path


def test_defaults_to_day_four(grid_file, capsys):
    assert main([str(grid_file)]) == 0
    assert capsys.readouterr().out == "Part 1: 4\nPart 2: 9\n"


def test_day_flag(tmp_path, capsys):
    path = tmp_path / "day5.txt"
    path.write_text("3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n", encoding="utf-8")
    assert main([str(path), "--day", "5"]) == 0
    assert capsys.readouterr().out == "Part 1: 3\nPart 2: 14\n"


def test_verbose(grid_file, capsys):
    assert main([str(grid_file), "-d", "4", "-v"]) == 0
    assert capsys.readouterr().out == "Part 1: 4\nPart 2: 9\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_non_utf8_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"@@\xff\xfe\n")
    assert main([str(path)]) == 1


def test_invalid_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("R10\nQ5\n", encoding="utf-8")
    assert main([str(path), "--day", "1"]) == 1
    assert capsys.readouterr().out == ""


def test_unknown_day_rejected(grid_file):
    with pytest.raises(SystemExit) as excinfo:
        parse_args([str(grid_file), "--day", "9"])
    assert excinfo.value.code == 2


def test_parse_args_defaults(grid_file):
    args = parse_args([str(grid_file)])
    assert args.day == 4
    assert args.verbose is False
    assert args.input == grid_file
