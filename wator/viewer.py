"""
Viewer: live matplotlib window over a running world.

One World.update() per drawn frame. The board raster is drawn through a
fixed colormap (one color per cell code) and a side panel plots fish and
shark counts over time.

Controls:
  space = pause / resume  |  close the window to stop
"""
import logging
import time
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import colors
from matplotlib.ticker import NullLocator

from .board import Board, Cell
from .config import WorldConfig
from .world import World

log = logging.getLogger(__name__)

# indexed by Cell code
PALETTE = (
    "#000000",  # empty
    "#00c853",  # fish
    "#b9f6ca",  # new fish
    "#d50000",  # shark
    "#ff8a80",  # new shark
    "#ffd600",  # fed shark
)

HUD_PERIOD = 2


def make_cmap():
    cmap = colors.ListedColormap(list(PALETTE))
    norm = colors.BoundaryNorm(list(range(len(PALETTE) + 1)), cmap.N)
    return cmap, norm


_RGBA = (colors.to_rgba_array(PALETTE) * 255).round().astype(np.uint8)


def to_rgba(board: Board) -> np.ndarray:
    """Pixel buffer of shape (height, width, 4), one RGBA per cell."""
    return _RGBA[board.cells]


def run_live(cfg: WorldConfig, fps: int = 30, max_ticks: Optional[int] = None) -> World:
    world = World(cfg)
    cmap, norm = make_cmap()

    fig, (ax, ax_pop) = plt.subplots(
        1, 2, figsize=(max(6.0, cfg.width / 40) + 4, max(4.0, cfg.height / 40)),
        gridspec_kw={"width_ratios": [3, 1]},
    )
    try: fig.canvas.manager.set_window_title("Wa-Tor")
    except Exception: pass

    ax.set_facecolor(PALETTE[Cell.EMPTY])
    ax.xaxis.set_major_locator(NullLocator()); ax.yaxis.set_major_locator(NullLocator())
    img = ax.imshow(world.board.cells, cmap=cmap, norm=norm,
                    interpolation="nearest", origin="upper")
    hud = ax.text(2, 2, "", color="white", fontsize=8, va="top")

    ax_pop.set_title("population", fontsize=8)
    ax_pop.tick_params(labelsize=7)
    fish_line, = ax_pop.plot([], [], color=PALETTE[Cell.FISH], label="fish")
    shark_line, = ax_pop.plot([], [], color=PALETTE[Cell.SHARK], label="sharks")
    ax_pop.legend(fontsize=7, loc="upper right")

    plt.tight_layout(); plt.pause(0.001)

    paused = False

    def on_key(ev):
        nonlocal paused
        if ev.key == " ":
            paused = not paused
            log.info("%s at tick %d", "paused" if paused else "resumed", world.tick)

    fig.canvas.mpl_connect("key_press_event", on_key)

    delay = 1.0 / max(1, fps)
    while plt.fignum_exists(fig.number):
        if max_ticks is not None and world.tick >= max_ticks:
            break
        if paused:
            plt.pause(delay)
            continue

        stats = world.update()
        img.set_data(world.board.cells)

        if world.tick % HUD_PERIOD == 0:
            hud.set_text(f"tick {stats.tick} | fish {stats.fish} | sharks {stats.sharks}")
            ticks = [s.tick for s in world.history]
            fish_line.set_data(ticks, [s.fish for s in world.history])
            shark_line.set_data(ticks, [s.sharks for s in world.history])
            ax_pop.relim(); ax_pop.autoscale_view()

        plt.pause(0.001); time.sleep(delay)

    plt.close(fig)
    return world
