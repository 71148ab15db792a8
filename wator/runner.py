"""
Runner: headless simulation. Call it from a script or notebook.
"""
import logging
from typing import Dict, List

from tqdm import trange

from .config import WorldConfig
from .world import TickStats, World

log = logging.getLogger(__name__)


def simulate(cfg: WorldConfig, ticks: int = 1000, stop_on_extinction: bool = True,
             progress: bool = True) -> List[TickStats]:
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")
    world = World(cfg)
    history = [world.stats()]
    bar = trange(ticks, desc="wa-tor", disable=not progress)
    for _ in bar:
        stats = world.update()
        history.append(stats)
        if progress:
            bar.set_postfix(fish=stats.fish, sharks=stats.sharks, refresh=False)
        if stop_on_extinction and world.extinct:
            log.info("stopping at tick %d: %s extinct", world.tick, ", ".join(world.extinctions))
            break
    bar.close()
    return history


def summarize(history: List[TickStats]) -> Dict[str, int]:
    if not history:
        return {"ticks": 0, "fish": 0, "sharks": 0, "peak_fish": 0, "peak_sharks": 0,
                "born_fish": 0, "born_sharks": 0, "eaten": 0, "starved": 0}
    last = history[-1]
    return {
        "ticks": last.tick - history[0].tick,
        "fish": last.fish,
        "sharks": last.sharks,
        "peak_fish": max(s.fish for s in history),
        "peak_sharks": max(s.sharks for s in history),
        "born_fish": sum(s.born_fish for s in history),
        "born_sharks": sum(s.born_sharks for s in history),
        "eaten": sum(s.eaten for s in history),
        "starved": sum(s.starved for s in history),
    }
