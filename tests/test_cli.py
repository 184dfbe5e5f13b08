from laddersim.cli import main, parse_args


def test_parse_args_defaults():
    options = parse_args([])
    assert (
        options.board_size,
        options.games,
        options.die_sides,
        options.exact_win,
        options.max_turns,
    ) == (100, 10000, 6, 1, 1000)


def test_parse_args_all_given():
    options = parse_args(["50", "20", "4", "0", "300"])
    assert (
        options.board_size,
        options.games,
        options.die_sides,
        options.exact_win,
        options.max_turns,
    ) == (50, 20, 4, 0, 300)


def test_parse_args_partial():
    options = parse_args(["80", "15"])
    assert options.board_size == 80
    assert options.games == 15
    assert options.die_sides == 6


def test_parse_args_lenient_numbers():
    options = parse_args(["abc", "12xyz"])
    assert options.board_size == 0
    assert options.games == 12


def test_main_prints_report(capsys):
    assert main(["100", "5", "6", "1", "1000"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Snakes:\n  16 -> 6\n")
    assert (
        "Running 5 games on 100-sized board with 6-sided die, "
        "exact_win=1, max_turns=1000\n" in out
    )
    assert "Games run: 5\n" in out
    assert "  80 -> 100: " in out


def test_main_without_turns_has_no_wins(capsys):
    assert main(["100", "3", "6", "1", "0"]) == 0
    out = capsys.readouterr().out
    assert "Wins: 0\n" in out
    assert "Average rolls to win" not in out
    assert "  16 -> 6: 0 times\n" in out