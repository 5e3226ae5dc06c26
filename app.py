import io
import logging
from collections import Counter
from typing import List

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from palette_wizard.cli import TERMINATE_TOKEN, TOKEN_COMMANDS
from palette_wizard.commands import Command
from palette_wizard.config import WizardConfig
from palette_wizard.export import save_palette
from palette_wizard.prompts import controls_text, prompt_text, selection_text
from palette_wizard.renderer.preview import PreviewRenderer
from palette_wizard.wizard import PaletteWizard

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="wide", page_title="Palette Wizard")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_session() -> None:
    if "wizard" not in st.session_state:
        st.session_state["config"] = WizardConfig()
        st.session_state["wizard"] = PaletteWizard()
        st.session_state["exported_path"] = None


def restart() -> None:
    st.session_state["wizard"] = PaletteWizard()
    st.session_state["exported_path"] = None


def get_keyboard_tokens() -> List[str]:
    """Command characters typed since the previous rerun."""
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="wizard_key_input",
            placeholder="Type: + / - adjust, > / < cycle, . confirm, q quit",
        )
        or ""
    )
    prev_value: str = st.session_state.get("wizard_key_input_prev", "")
    st.session_state["wizard_key_input_prev"] = value
    if value == prev_value:
        return []
    return list((Counter(value) - Counter(prev_value)).elements())


def handle_keyboard(wizard: PaletteWizard) -> None:
    # Everything typed between reruns lands in the same tick.
    tokens = get_keyboard_tokens()
    for token in tokens:
        if token == TERMINATE_TOKEN:
            wizard.terminate()
        elif token in TOKEN_COMMANDS:
            wizard.press(TOKEN_COMMANDS[token])
    if tokens and not wizard.terminated:
        wizard.update()


def do_command(wizard: PaletteWizard, command: Command) -> None:
    # One button press per rerun: push, then drain as a single tick.
    wizard.press(command)
    wizard.update()


# --------- Main App ---------

set_default_session()
wizard: PaletteWizard = st.session_state["wizard"]
config: WizardConfig = st.session_state["config"]
renderer = PreviewRenderer(resolution=config.preview_resolution)

tab_wizard, tab_state = st.tabs(["Wizard", "State"])

with tab_wizard:
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
            restart()
            wizard = st.session_state["wizard"]

        if st.button("⏏️ Quit", key="quit_btn", use_container_width=True):
            wizard.terminate()

        handle_keyboard(wizard)

        st.divider()

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_command(wizard, Command.CYCLE_NEXT)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_command(wizard, Command.DECREASE)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_command(wizard, Command.CYCLE_PREV)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_command(wizard, Command.INCREASE)
        if st.button("↩️ Confirm", key="confirm_btn", use_container_width=True):
            do_command(wizard, Command.CONFIRM)

    view = wizard.snapshot()

    with left_col:
        st.info(f"**{prompt_text(view)}**", icon="🎨")
        st.info(selection_text(view), icon="🎚️")
        hint = controls_text(view)
        if hint:
            st.caption(hint)
        if view.saturation is not None:
            st.caption(f"Saturation: {view.saturation:.0%}")
        if view.brightness is not None:
            st.caption(f"Brightness: {view.brightness:.0%}")
        st.caption(f"Hue offset: {wizard.state.hue_offset:+.3f}")

    with middle_col:
        if wizard.terminated:
            st.warning("Wizard terminated, nothing was exported.")
            st.stop()

        img = renderer.render(view)
        st.image(img, use_container_width=True)

        if wizard.finished:
            palette = wizard.export_image(config.export_resolution)
            if st.session_state["exported_path"] is None:
                path = config.export.resolve_path()
                if save_palette(palette, path):
                    st.session_state["exported_path"] = str(path)
                else:
                    st.session_state["exported_path"] = ""
            exported = st.session_state["exported_path"]
            if exported:
                st.success(f"Palette saved to `{exported}`")
            else:
                st.error("Palette could not be saved; download it instead.")

            buffer = io.BytesIO()
            palette.save(buffer, format="PNG")
            st.download_button(
                "Download palette",
                data=buffer.getvalue(),
                file_name=config.export.filename,
                mime="image/png",
                use_container_width=True,
            )

with tab_state:
    st.json(wizard.snapshot().as_dict(), expanded=1)
