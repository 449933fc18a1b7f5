import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from game_of_life.viewer import run_live  # noqa: E402
from game_of_life.world import Status, new_world  # noqa: E402


def test_run_live_stops_on_still_life():
    w = new_world(6, 6, [(1, 1), (1, 2), (2, 1), (2, 2)])
    status = run_live(w, fps=1000, hold=False)
    assert status is Status.STATIC
    assert w.current_step() == 1
    assert not plt.get_fignums()


def test_run_live_respects_generation_limit():
    w = new_world(None, None, [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], bounded=False)
    status = run_live(w, fps=1000, max_generations=3, hold=False)
    assert status is Status.CAOS
    assert w.current_step() == 3
