import pytest

from solitaire.simulator import CONTINUE_PROMPT, SimulatorConfig, main, parse_args, run


def scripted(lines, prompts=None):
    it = iter(lines)

    def read_line(prompt):
        if prompts is not None:
            prompts.append(prompt)
        return next(it)

    return read_line


def test_user_config_reprompts_until_valid(capsys):
    cfg = SimulatorConfig(user_config=True, final_piles=3)
    board = run(cfg, scripted(["abc", "6 0", "3 3 1", "5 1"]))
    out = capsys.readouterr().out
    assert "Number of total cards is 6" in out
    assert out.count("ERROR: Each pile must have at least one card") == 3
    assert "[1] Current configuration: 4 2" in out
    assert "[2] Current configuration: 3 1 2" in out
    assert out.rstrip().endswith("Done!")
    assert board.is_done()


def test_single_step_pauses_between_rounds(capsys):
    prompts = []
    cfg = SimulatorConfig(user_config=True, single_step=True, final_piles=3)
    run(cfg, scripted(["6", "", ""], prompts))
    out = capsys.readouterr().out
    assert out.count("Current configuration") == 3
    assert prompts.count(CONTINUE_PROMPT) == 2


def test_random_mode_runs_to_completion(capsys):
    board = run(SimulatorConfig(final_piles=4, seed=5), scripted([]))
    out = capsys.readouterr().out
    assert board.is_done()
    assert out.rstrip().endswith("Done!")


def test_parse_args_modes():
    args = parse_args(["-s", "-u", "--piles", "4", "--seed", "9"])
    assert args.user_config and args.single_step
    assert args.piles == 4
    assert args.seed == 9
    args = parse_args([])
    assert not args.user_config and not args.single_step
    assert args.piles == 9


def test_main_random_game(capsys):
    assert main(["--piles", "3", "--seed", "1", "--quiet"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Done!")


def test_main_reports_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["-u", "--quiet"]) == 1
    assert "Input ended" in capsys.readouterr().out


def test_main_batch_prints_statistics(capsys):
    assert main(["--games", "15", "--piles", "4", "--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert "Games: 15" in out
    assert "Rounds to finish: min " in out
    assert "(bound 12)" in out
    assert "Current configuration" not in out


def test_batch_statistics_are_seeded(capsys):
    main(["--games", "5", "--seed", "11"])
    first = capsys.readouterr().out
    main(["--games", "5", "--seed", "11"])
    assert capsys.readouterr().out == first


@pytest.mark.parametrize("argv", [["--games", "0"], ["--games", "3", "-u"], ["--games", "3", "-s"]])
def test_batch_rejects_bad_options(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)
