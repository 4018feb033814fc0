from warcards.demo import main


def test_demo_prints_game(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Alice played ")
    assert "Overall statistics:" in out
    assert "Player 2 (Bob):" in out


def test_demo_is_reproducible_with_seed(capsys):
    main(["--seed", "42"])
    first = capsys.readouterr().out
    main(["--seed", "42"])
    second = capsys.readouterr().out
    assert first == second


def test_demo_reports_stack_after_five_turns(capsys):
    main(["--seed", "3"])
    lines = capsys.readouterr().out.splitlines()
    remaining = int(lines[1])
    assert 0 <= remaining <= 21