import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from pacman_world.actions import GymAction
from pacman_world.config import parse_seed
from pacman_world.gym_env import ObsType, PacmanEnv
from pacman_world.levels import load_level_or_exit
from pacman_world.renderer.texture import DEFAULT_ASSET_ROOT, DEFAULT_RESOLUTION

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="wide", page_title="Pacman World")
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

KEY_MAP: Dict[str, GymAction] = {
    "w": GymAction.UP,
    "s": GymAction.DOWN,
    "a": GymAction.LEFT,
    "d": GymAction.RIGHT,
    "q": GymAction.WAIT,
}


@dataclass(frozen=True)
class AppConfig:
    level_path: str
    seed: Optional[int]
    resolution: int
    asset_root: str


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            level_path=f"{DEFAULT_ASSET_ROOT}/levels/classic.txt",
            seed=None,
            resolution=DEFAULT_RESOLUTION,
            asset_root=DEFAULT_ASSET_ROOT,
        )


def get_config_from_widgets() -> AppConfig:
    config: AppConfig = st.session_state["config"]
    level_path = st.text_input("Level file", value=config.level_path)
    seed_text = st.text_input(
        "Seed (blank for random)",
        value="" if config.seed is None else str(config.seed),
    )
    seed = parse_seed(seed_text)
    resolution = st.slider(
        "Resolution", min_value=200, max_value=1000, value=config.resolution, step=50
    )
    asset_root = st.text_input("Asset directory", value=config.asset_root)
    return replace(
        config,
        level_path=level_path,
        seed=seed,
        resolution=resolution,
        asset_root=asset_root,
    )


def make_env_and_reset(config: AppConfig) -> None:
    # A broken level file ends the script run
    level = load_level_or_exit(config.level_path)
    env = PacmanEnv(
        level=level,
        seed=config.seed,
        render_resolution=config.resolution,
        render_asset_root=config.asset_root,
    )
    obs, info = env.reset()
    st.session_state["env"] = env
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["best_score"] = 0
    st.session_state["games_lost"] = 0


def get_keyboard_action() -> Optional[GymAction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="pacman_key_input",
            placeholder="Type: WASD to move, q to wait",
        )
        or ""
    )
    prev_value: str = st.session_state.get("pacman_key_input_prev", "")
    st.session_state["pacman_key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return KEY_MAP.get(new_values[-1].lower())
    return None


def do_action(env: PacmanEnv, action: GymAction) -> None:
    obs, _, terminated, _, info = env.step(action)
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    if terminated:
        st.session_state["games_lost"] += 1
        st.toast("Caught by the bunny! Starting over.")
    st.session_state["best_score"] = max(
        st.session_state["best_score"], obs["info"]["status"]["score"]
    )


# --------- Main App ---------

set_default_config()

with st.sidebar:
    config = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_env_and_reset(config)

if "env" not in st.session_state:
    make_env_and_reset(st.session_state["config"])

left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

with right_col:
    if st.button("🔁 New Game", key="new_game_btn", use_container_width=True):
        make_env_and_reset(st.session_state["config"])

    action = get_keyboard_action()
    _, up_col, _ = st.columns(3)
    with up_col:
        if st.button("⬆️", key="up_btn", use_container_width=True):
            action = GymAction.UP
    left_btn_col, wait_col, right_btn_col = st.columns(3)
    with left_btn_col:
        if st.button("⬅️", key="left_btn", use_container_width=True):
            action = GymAction.LEFT
    with wait_col:
        if st.button("⏸️", key="wait_btn", use_container_width=True):
            action = GymAction.WAIT
    with right_btn_col:
        if st.button("➡️", key="right_btn", use_container_width=True):
            action = GymAction.RIGHT
    _, down_col, _ = st.columns(3)
    with down_col:
        if st.button("⬇️", key="down_btn", use_container_width=True):
            action = GymAction.DOWN

    env: PacmanEnv = st.session_state["env"]
    if action is not None:
        do_action(env, action)

obs: ObsType = st.session_state["obs"]
status = obs["info"]["status"]

with left_col:
    st.info(f"**Score:** {status['score']}", icon="🍒")
    st.info(f"**Best:** {st.session_state['best_score']}", icon="🏅")
    st.info(f"**Times caught:** {st.session_state['games_lost']}", icon="🐰")
    st.info(f"**Turn:** {status['turn']}", icon="⏱️")

with middle_col:
    st.image(obs["image"], use_container_width=True)
