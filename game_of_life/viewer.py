"""
Live viewer: draws each generation with matplotlib until the pattern dies out,
repeats itself, or the window is closed.

Controls:
  SPACE = pause / resume  |  +/- = faster / slower  |  Q = quit
"""
import time
from typing import Dict, Optional

import matplotlib.pyplot as plt
from matplotlib import colors
from matplotlib.ticker import NullLocator

from .world import Status, World

DEAD_COLOR = "#2b2b2b"
ALIVE_COLOR = "#ffab00"


def _frame(world: World):
    if world.cfg.has_size:
        return world.to_array(0, 0, world.cfg.width, world.cfg.height)
    frame = world.to_array()
    if frame.size == 0:
        return world.to_array(0, 0, 1, 1)
    return frame


def run_live(world: World, fps: int = 10, max_generations: Optional[int] = None,
             hold: bool = True) -> Status:
    cmap = colors.ListedColormap([DEAD_COLOR, ALIVE_COLOR])
    norm = colors.BoundaryNorm([0, 1, 2], cmap.N)

    frame = _frame(world)
    fig, ax = plt.subplots(figsize=(max(3, frame.shape[1] / 6), max(3, frame.shape[0] / 6)))
    try: fig.canvas.manager.set_window_title("Game of Life")
    except AttributeError: pass
    ax.xaxis.set_major_locator(NullLocator()); ax.yaxis.set_major_locator(NullLocator())
    img = ax.imshow(frame, cmap=cmap, norm=norm, interpolation="nearest", origin="upper")
    hud = ax.set_title("", fontsize=9, family="monospace")

    paused = False
    delay = 1.0 / max(1, fps)

    def on_key(ev):
        nonlocal paused, delay
        if ev.key == " ": paused = not paused
        elif ev.key in ("+", "="): delay = max(0.005, delay / 1.5)
        elif ev.key in ("-", "_"): delay = min(2.0, delay * 1.5)
        elif ev.key in ("q", "Q"): plt.close(fig)

    fig.canvas.mpl_connect("key_press_event", on_key)

    seen: Dict[str, int] = {}
    status = Status.CAOS
    ticks = 0
    while plt.fignum_exists(fig.number):
        if paused:
            plt.pause(0.05)
            continue
        num_alive = world.count_alive()
        status = world.status(seen)
        hud.set_text(f"step {world.current_step()} | alive {num_alive} | {status.value}")
        if status.terminal or (max_generations is not None and ticks >= max_generations):
            break
        world.step()
        ticks += 1

        frame = _frame(world)
        img.set_data(frame)
        img.set_extent((-0.5, frame.shape[1] - 0.5, frame.shape[0] - 0.5, -0.5))
        plt.pause(0.001); time.sleep(delay)

    if hold and plt.fignum_exists(fig.number):
        plt.show()
    plt.close(fig)
    return status
