import pytest

from nontransitive_dice.cli import GameController, main
from nontransitive_dice.config import GameConfig
from nontransitive_dice.errors import ValidationError
from nontransitive_dice.state import MatchPhase

DICE_ARGS = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


def test_main_rejects_two_dice_with_status_1(capsys) -> None:
    assert main(["1,2,3", "4,5,6"]) == 1
    err = capsys.readouterr().err
    assert "at least 3 dice" in err
    assert "Example usage" in err


def test_main_names_bad_die(capsys) -> None:
    assert main(["1,2", "a,b,c", "3,4,5"]) == 1
    assert "Die #2" in capsys.readouterr().err


def test_main_exit_at_first_prompt_returns_zero(scripted_ui) -> None:
    ui, out = scripted_ui(["X"])
    assert main(DICE_ARGS, ui=ui) == 0
    text = out.getvalue()
    assert "Exiting game. Goodbye!" in text
    assert "You won" not in text
    assert "Choose your dice" not in text


def test_main_treats_closed_input_as_interrupt(scripted_ui) -> None:
    ui, out = scripted_ui([])
    assert main(DICE_ARGS, ui=ui) == 0
    assert "Game interrupted" in out.getvalue()


def test_main_plays_a_full_match(scripted_ui, fixed_crypto) -> None:
    ui, out = scripted_ui(["1", "0", "3", "1", "n"])
    assert main(DICE_ARGS, ui=ui, crypto=fixed_crypto([1, 0, 2, 4])) == 0
    text = out.getvalue()
    assert "You won! (9 > 8)" in text
    assert "Thanks for playing!" in text


def test_controller_replays_with_fresh_state(make_session) -> None:
    lines = ["1", "0", "3", "1", "y", "0", "1", "0", "0", "n"]
    session, out = make_session(lines, [1, 0, 2, 4, 0, 0, 4, 0])
    controller = GameController(session)
    last = controller.run()
    assert controller.matches_played == 2
    assert last.outcome == "opponent_win"
    assert (last.user_die_index, last.opponent_die_index) == (1, 0)
    assert last.opponent_roll.face == 9
    assert out.getvalue().count("--- Results ---") == 2


def test_controller_stops_on_cancel(make_session) -> None:
    session, out = make_session(["1", "x"], [1, 0])
    controller = GameController(session)
    last = controller.run()
    assert controller.matches_played == 1
    assert last.phase is MatchPhase.CANCELLED
    assert "Play another round" not in out.getvalue()


def test_exit_token_after_match_ends_session(make_session) -> None:
    session, out = make_session(["1", "0", "3", "1", "X"], [1, 0, 2, 4])
    controller = GameController(session)
    last = controller.run()
    assert controller.matches_played == 1
    assert last.outcome == "user_win"
    assert "Thanks for playing!" in out.getvalue()


def test_config_reads_log_level_from_environment() -> None:
    assert GameConfig.from_env({"DICE_GAME_LOG_LEVEL": "debug"}).log_level == "DEBUG"
    assert GameConfig.from_env({}).log_level == "WARNING"


def test_config_refuses_short_keys() -> None:
    with pytest.raises(ValueError):
        GameConfig(key_bytes=8)


def test_invocation_command_appears_in_usage() -> None:
    ValidationError.set_invocation_command("py")
    try:
        assert "py " in str(ValidationError("boom"))
    finally:
        ValidationError.set_invocation_command("python")
