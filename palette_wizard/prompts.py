"""User-facing texts per stage.

Front-ends show three lines: the prompt (what is being chosen), the selection
(the current choice) and the controls hint.
"""

from typing import Dict

from palette_wizard.snapshot import Snapshot
from palette_wizard.types import HueStyle, RenderStyle, Stage, TintChannel

PROMPTS: Dict[Stage, str] = {
    Stage.PICK_HUE_STYLE: "Which style of palette derivation?",
    Stage.PICK_HUE_COUNT: "How many different hues?",
    Stage.PICK_VALUE_COUNT: "How many swatches for each hue?",
    Stage.ADJUST_SATURATION: "Adjust the saturation as needed:",
    Stage.ADJUST_BRIGHTNESS: "Adjust the brightness as needed:",
    Stage.ADJUST_TINTS: "Adjust RGB tint",
    Stage.PICK_RENDER_STYLE: "Which style of rendering finalization?",
}

CHANNEL_NAMES: Dict[TintChannel, str] = {
    TintChannel.R: "Red",
    TintChannel.G: "Green",
    TintChannel.B: "Blue",
}

DEFAULT_CONTROLS = "Use LEFT / RIGHT arrows to adjust. Press ENTER to submit."
TINT_CONTROLS = (
    "Use UP / DOWN to cycle RGB. Use LEFT / RIGHT arrows to adjust. "
    "Press ENTER to submit."
)
FINISHED_PROMPT = "Palette finalized."


def prompt_text(snapshot: Snapshot) -> str:
    if snapshot.finished:
        return FINISHED_PROMPT
    return PROMPTS[snapshot.stage]


def selection_text(snapshot: Snapshot) -> str:
    stage = snapshot.stage
    value = snapshot.selection_value
    if snapshot.finished:
        return f"Selected style: {snapshot.render_style.name}"
    if stage == Stage.PICK_HUE_STYLE:
        return f"Selected style: {list(HueStyle)[value].name}"
    if stage == Stage.PICK_HUE_COUNT:
        return f"Hue count: {value}"
    if stage == Stage.PICK_VALUE_COUNT:
        return f"Value swatch count: {value}"
    if stage == Stage.ADJUST_SATURATION:
        return f"Saturation level: {value * 10}%"
    if stage == Stage.ADJUST_BRIGHTNESS:
        return f"Brightness level: {value * 10}%"
    if stage == Stage.ADJUST_TINTS:
        channel = snapshot.tint_channel
        level = snapshot.tint.level(channel)
        return f"{CHANNEL_NAMES[channel]} tint level: {float(level)}%"
    return f"Selected style: {list(RenderStyle)[value].name}"


def controls_text(snapshot: Snapshot) -> str:
    if snapshot.finished:
        return ""
    if snapshot.stage == Stage.ADJUST_TINTS:
        return TINT_CONTROLS
    return DEFAULT_CONTROLS
