import logging
import os
from enum import StrEnum, auto
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw

from pacman_world.components import Position
from pacman_world.state import State
from pacman_world.types import Cell

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 500
DEFAULT_ASSET_ROOT = "assets"

RGBA = Tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
GRAY: RGBA = (128, 128, 128, 255)
YELLOW: RGBA = (255, 255, 0, 255)
PINK: RGBA = (255, 175, 175, 255)

TILE_COLORS: Dict[Cell, RGBA] = {
    Cell.EMPTY: BLACK,
    Cell.WALL: GRAY,
    Cell.YELLOW_PELLET: BLACK,
    Cell.PINK_PELLET: BLACK,
}

PELLET_COLORS: Dict[Cell, RGBA] = {
    Cell.YELLOW_PELLET: YELLOW,
    Cell.PINK_PELLET: PINK,
}


class AppearanceName(StrEnum):
    PACMAN = auto()
    BUNNY = auto()
    CHERRY = auto()


TextureMap = Dict[AppearanceName, str]
TexLookupFn = Callable[[AppearanceName, int], Optional[Image.Image]]

DEFAULT_TEXTURE_MAP: TextureMap = {
    AppearanceName.PACMAN: "pacman.png",
    AppearanceName.CHERRY: "cherry.jpg",
    AppearanceName.BUNNY: "bunny.jpg",
}


@lru_cache(maxsize=256)
def load_texture(path: str, size: int) -> Optional[Image.Image]:
    """Load and scale a sprite, or ``None`` if it cannot be read.

    Failures are logged once per (path, size) and otherwise ignored; the
    entity is then drawn as nothing.
    """
    try:
        with Image.open(path) as image:
            return image.convert("RGBA").resize((size, size))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load image '%s': %s", path, exc)
        return None


def sprite_positions(state: State) -> List[Tuple[AppearanceName, Position]]:
    """Sprites to draw, bottom layer first; an absent bonus is skipped."""
    sprites = [(AppearanceName.PACMAN, state.player), (AppearanceName.BUNNY, state.enemy)]
    if state.bonus is not None:
        sprites.append((AppearanceName.CHERRY, state.bonus))
    return sprites


def draw_tiles(draw: ImageDraw.ImageDraw, state: State, cell_size: int) -> None:
    for pos, cell in state.cells():
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        draw.rectangle(
            [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1], fill=TILE_COLORS[cell]
        )
        pellet_color = PELLET_COLORS.get(cell)
        if pellet_color is not None:
            offset = 3 * cell_size // 8
            diameter = max(1, cell_size // 4)
            draw.ellipse(
                [
                    x0 + offset,
                    y0 + offset,
                    x0 + offset + diameter - 1,
                    y0 + offset + diameter - 1,
                ],
                fill=pellet_color,
            )


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    texture_map: Optional[TextureMap] = None,
    asset_root: str = DEFAULT_ASSET_ROOT,
    tex_lookup_fn: Optional[TexLookupFn] = None,
) -> Image.Image:
    """
    Renders the state as an RGBA PIL Image; ``resolution`` is the image width.
    """
    cell_size: int = max(1, resolution // state.width)

    if texture_map is None:
        texture_map = DEFAULT_TEXTURE_MAP

    def default_get_tex(name: AppearanceName, size: int) -> Optional[Image.Image]:
        path = texture_map.get(name)
        if not path:
            return None
        return load_texture(os.path.join(asset_root, path), size)

    tex_lookup = tex_lookup_fn or default_get_tex

    img = Image.new("RGBA", (state.width * cell_size, state.height * cell_size), BLACK)
    draw = ImageDraw.Draw(img)
    draw_tiles(draw, state, cell_size)

    for name, pos in sprite_positions(state):
        tex = tex_lookup(name, cell_size)
        if tex is not None:
            img.alpha_composite(tex, (pos.x * cell_size, pos.y * cell_size))

    draw = ImageDraw.Draw(img)
    draw.text((2, max(0, cell_size - 12)), f"Score: {state.score}", fill=YELLOW)
    return img


class TextureRenderer:
    resolution: int
    texture_map: TextureMap
    asset_root: str
    tex_lookup_fn: Optional[TexLookupFn]

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        texture_map: Optional[TextureMap] = None,
        asset_root: str = DEFAULT_ASSET_ROOT,
        tex_lookup_fn: Optional[TexLookupFn] = None,
    ):
        self.resolution = resolution
        self.texture_map = texture_map or DEFAULT_TEXTURE_MAP
        self.asset_root = asset_root
        self.tex_lookup_fn = tex_lookup_fn

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            texture_map=self.texture_map,
            asset_root=self.asset_root,
            tex_lookup_fn=self.tex_lookup_fn,
        )
