from game_of_life.patterns import get_pattern
from game_of_life.viewer import run_live
from game_of_life.world import new_world

if __name__ == "__main__":
    # R-pentomino on a 64x48 board keeps changing for a long while before settling.
    run_live(new_world(64, 48, get_pattern("r_pentomino", offset=(30, 22))), fps=15)
