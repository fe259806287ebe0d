import pytest

from blobwars import BlobwarsEnv, Player, SessionConfig
from blobwars.env import ENV_COMMANDS
from blobwars.session import Command

SELECT = ENV_COMMANDS.index(Command.SELECT)
RIGHT = ENV_COMMANDS.index(Command.RIGHT)


def test_reset_returns_valid_observation() -> None:
    env = BlobwarsEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (7, 8, 8)
    assert obs["aux"].shape == (5,)
    assert env.observation_space.contains(obs)
    assert info["current_player"] == Player.BLUE
    assert info["score"] == {Player.RED: 1, Player.BLUE: 1}


def test_clone_rewards_red() -> None:
    env = BlobwarsEnv()
    env.reset()

    rewards = []
    for action in (SELECT, SELECT, RIGHT, SELECT):
        _, reward, terminated, truncated, _ = env.step(action)
        rewards.append(reward)
        assert not terminated and not truncated
    _, reward, terminated, _, info = env.step(SELECT)

    assert rewards == [0.0, 0.0, 0.0, 0.0]
    assert reward == 1.0
    assert not terminated
    assert info["score"][Player.RED] == 2


def test_full_board_terminates() -> None:
    env = BlobwarsEnv(SessionConfig(layout=["RB"]))
    env.reset()

    _, reward, terminated, _, _ = env.step(SELECT)

    assert terminated
    assert reward == 0.0


def test_invalid_action_raises() -> None:
    env = BlobwarsEnv()
    env.reset()

    with pytest.raises(ValueError):
        env.step(len(ENV_COMMANDS))


def test_render_ansi() -> None:
    env = BlobwarsEnv(SessionConfig(layout=["R.", ".B"]), render_mode="ansi")
    env.reset()

    text = env.render()

    assert text.splitlines()[0] == "[R] . "
    assert "Blue: 1" in text
