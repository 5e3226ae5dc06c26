import pytest

from palette_wizard.commands import GymCommand
from palette_wizard.gym_env import PaletteWizardEnv
from palette_wizard.types import Stage


@pytest.fixture
def env() -> PaletteWizardEnv:
    return PaletteWizardEnv(render_resolution=64)


def test_reset_observation(env: PaletteWizardEnv) -> None:
    obs, info = env.reset(seed=0)
    assert obs["image"].shape == (64, 64, 4)
    assert obs["info"]["stage"] == Stage.PICK_HUE_STYLE.value
    assert info == {"stage_index": 0}
    assert env.action_space.n == len(GymCommand)


def test_step_advances_one_tick(env: PaletteWizardEnv) -> None:
    obs, reward, terminated, truncated, info = env.step(int(GymCommand.CONFIRM))
    assert reward == 0.0
    assert not terminated and not truncated
    assert info == {"stage_index": 1}
    assert obs["info"]["tick"] == 1
    assert obs["info"]["selection_value"] == 1


def test_invalid_action(env: PaletteWizardEnv) -> None:
    with pytest.raises(ValueError):
        env.step(len(GymCommand))


def test_episode_terminates_on_final_confirm(env: PaletteWizardEnv) -> None:
    assert env.render("palette") is None
    terminated = False
    steps = 0
    while not terminated:
        _, _, terminated, _, _ = env.step(int(GymCommand.CONFIRM))
        steps += 1
    assert steps == len(Stage)
    palette = env.render("palette")
    assert palette is not None
    assert palette.size == (16, 48)
    assert env.state_info()["finished"] == 1


def test_preview_render(env: PaletteWizardEnv) -> None:
    img = env.render()
    assert img is not None
    assert img.size == (64, 64)


def test_unknown_render_mode(env: PaletteWizardEnv) -> None:
    with pytest.raises(NotImplementedError):
        env.render("ascii")


def test_observations_stay_in_observation_space(env: PaletteWizardEnv) -> None:
    obs, _ = env.reset()
    assert env.observation_space.contains(obs)
    # Walk through every stage, including a negative tint level.
    actions = [GymCommand.INCREASE, GymCommand.CONFIRM, GymCommand.INCREASE]
    actions += [GymCommand.CYCLE_NEXT] + [GymCommand.CONFIRM] * 4
    actions += [GymCommand.DECREASE, GymCommand.CYCLE_PREV, GymCommand.CONFIRM]
    actions += [GymCommand.INCREASE, GymCommand.CONFIRM]
    terminated = False
    for action in actions:
        obs, _, terminated, _, _ = env.step(int(action))
        assert env.observation_space.contains(obs)
    assert terminated
    assert obs["info"]["tint"].tolist() == [-5, 0, 0]
    assert len(obs["info"]["hues"]) == 2
