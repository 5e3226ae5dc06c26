"""Gymnasium environment wrapper for the palette wizard.

Each environment step sends exactly one command (one tick), so agents and
scripted drivers move through the wizard the same way a keyboard user does.
The observation pairs the rendered live preview with a compact state dict.
Reward is always 0 (there is no objective beyond finishing); ``terminated``
becomes ``True`` once the render style is confirmed.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {stage, selection, hues, value_ids, tint, ...}}``

Usage:

``env = PaletteWizardEnv(render_resolution=320)``
"""

import string
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from palette_wizard.commands import Command, GymCommand
from palette_wizard.components.tint import TINT_MAX
from palette_wizard.export import EXPORT_RESOLUTION, palette_image
from palette_wizard.renderer.preview import DEFAULT_RESOLUTION, PreviewRenderer
from palette_wizard.snapshot import snapshot
from palette_wizard.state import State
from palette_wizard.step import step
from palette_wizard.types import Stage

ObsType = Dict[str, Any]

# Enum values are lowercase snake case.
TEXT_CHARSET = string.ascii_lowercase + "_"
# Decreasing a tint channel has no floor.
TINT_FLOOR = -(2**31)


def observation_info(state: State) -> Dict[str, Any]:
    """Serialize ``state`` into the ``info`` entry of an observation.

    Only the keys declared in the observation space are emitted, with numpy
    values shaped and typed the way the space expects.
    """

    def as_int(value: int) -> np.ndarray:
        return np.array(value, dtype=np.int64)

    def as_units(values: Any) -> Tuple[np.ndarray, ...]:
        return tuple(np.array(value, dtype=np.float64) for value in values)

    tint = state.tint
    return {
        "stage": state.stage.value,
        "selection_value": as_int(state.selection.value),
        "selection_min": as_int(state.selection.min),
        "selection_max": as_int(state.selection.max),
        "hues": as_units(state.hues),
        "value_ids": as_units(state.value_ids),
        "tint": np.array([tint.r, tint.g, tint.b], dtype=np.int64),
        "tint_channel": state.tint_channel.value,
        "render_style": state.render_style.value,
        "finished": int(state.finished),
        "tick": as_int(state.tick),
    }


class PaletteWizardEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` driving one wizard run per episode.

    The action space is ``Discrete(len(Command))``; see
    :class:`palette_wizard.commands.GymCommand` for the mapping.
    """

    metadata = {"render_modes": ["human", "preview", "palette"]}

    def __init__(
        self,
        render_mode: str = "preview",
        render_resolution: int = DEFAULT_RESOLUTION,
        export_resolution: int = EXPORT_RESOLUTION,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "preview" returns the live preview, "palette" the
                exported palette (once finished), "human" opens a window.
            render_resolution: Width and height of the preview image.
            export_resolution: Swatch size of the "palette" render mode.
        """
        from gymnasium import spaces

        self.state: Optional[State] = None
        self._render_mode = render_mode
        self._render_resolution = render_resolution
        self._export_resolution = export_resolution
        self._renderer = PreviewRenderer(resolution=render_resolution)

        text_space = spaces.Text(max_length=32, charset=TEXT_CHARSET)
        unit_space = spaces.Box(low=-np.inf, high=np.inf, shape=(), dtype=np.float64)

        def int_box(low: int, high: int, shape: Tuple[int, ...] = ()) -> spaces.Box:
            return spaces.Box(
                low=np.full(shape, low, dtype=np.int64),
                high=np.full(shape, high, dtype=np.int64),
                shape=shape,
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_resolution, render_resolution, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "stage": text_space,
                        "selection_value": int_box(0, 255),
                        "selection_min": int_box(0, 255),
                        "selection_max": int_box(0, 255),
                        "hues": spaces.Sequence(unit_space),
                        "value_ids": spaces.Sequence(unit_space),
                        "tint": int_box(TINT_FLOOR, TINT_MAX, shape=(3,)),
                        "tint_channel": text_space,
                        "render_style": text_space,
                        "finished": spaces.Discrete(2),
                        "tick": int_box(0, 1_000_000_000),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(Command))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new wizard run.

        Arguments:
            seed: Unused; the wizard is deterministic.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = State()
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Send one command and advance one tick.

        Arguments:
            action: Integer index into ``GymCommand``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(Command):
            raise ValueError(f"Invalid action: {action}")
        command = Command[GymCommand(int(action)).name]

        self.state = step(self.state, [command])
        return self._get_obs(), 0.0, self.state.finished, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: Overrides the configured render mode for this call.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        if render_mode == "palette":
            if self.state.final_colors is None:
                return None
            return palette_image(self.state.final_colors, self._export_resolution)
        img = self._renderer.render(snapshot(self.state))
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "preview":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Any]:
        """Return the structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return observation_info(self.state)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(snapshot(self.state))
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        assert self.state is not None
        return {"stage_index": Stage(self.state.stage).index}

    def close(self) -> None:
        pass
