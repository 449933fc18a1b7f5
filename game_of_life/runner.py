"""
Runner: ticks a World until it dies out, repeats itself, or runs out of budget.
This is the single loop the CLI and notebooks call.

Each tick collects the pre-step metrics (alive count, fingerprint, status),
steps the world and hands everything to the optional `on_tick` callback.
A watchdog timer sets the stop event once `time_budget` seconds have passed;
the loop only looks at it between ticks.
"""
import logging
import threading
from typing import Any, Callable, Dict, List, MutableMapping, Optional

from tqdm import tqdm

from .world import Status, World

logger = logging.getLogger(__name__)

OnTick = Callable[[int, Status, int, str, World], None]

DEFAULT_INTERVAL = 0.1      # seconds between ticks
DEFAULT_TIME_BUDGET = 30.0  # seconds before the watchdog stops the run


def simulate(
    world: World,
    max_generations: Optional[int] = None,
    time_budget: Optional[float] = DEFAULT_TIME_BUDGET,
    interval: float = DEFAULT_INTERVAL,
    on_tick: Optional[OnTick] = None,
    stop: Optional[threading.Event] = None,
    seen: Optional[MutableMapping[str, int]] = None,
    progress: bool = False,
) -> Dict[str, Any]:
    stop = stop if stop is not None else threading.Event()
    seen = seen if seen is not None else {}
    timed_out = threading.Event()

    def _time_up() -> None:
        timed_out.set()
        stop.set()

    watchdog = None
    if time_budget is not None:
        watchdog = threading.Timer(time_budget, _time_up)
        watchdog.daemon = True
        watchdog.start()

    population: List[int] = []
    status: Optional[Status] = None
    reason = "stopped"
    i = 0
    bar = tqdm(total=max_generations, desc="generations", disable=not progress)
    try:
        while True:
            if stop.is_set():
                break
            if max_generations is not None and i >= max_generations:
                reason = "max_generations"
                break
            num_alive = world.count_alive()
            fp = world.fingerprint()
            status = world.status(seen)
            population.append(num_alive)
            world.step()
            if on_tick is not None:
                on_tick(i, status, num_alive, fp, world)
            i += 1
            bar.update(1)
            if status.terminal:
                reason = "status"
                break
            if interval > 0 and stop.wait(interval):
                break
    finally:
        bar.close()
        if watchdog is not None:
            watchdog.cancel()

    if reason == "stopped" and timed_out.is_set():
        reason = "time_up"
    logger.info("run stopped after %d iterations (%s, last status %s)",
                i, reason, status.value if status else None)
    return {
        "iterations": i,
        "final_status": status,
        "reason": reason,
        "alive": world.count_alive(),
        "step": world.current_step(),
        "fingerprints": seen,
        "population": population,
    }
