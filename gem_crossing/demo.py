"""Simple command line demo for the crossing game logic."""

import random

from .game import CrossingGame, Direction, Scene

# A route over stone and grass that visits every gem without touching water.
ROUTE = (
    "up", "up", "right", "right", "up", "up", "up",
    "down", "left", "left", "left", "left",
    "down", "down",
)

FRAME_TIME = 1 / 60


def play(game: CrossingGame, route=ROUTE):
    """Walk ``route`` one frame per step and return the transitions seen."""

    transitions = [game.scene]
    game.confirm()
    transitions.append(game.scene)
    for name in route:
        game.move_player(Direction.from_name(name))
        game.update(FRAME_TIME)
        if game.scene is not transitions[-1]:
            transitions.append(game.scene)
        if game.scene is Scene.WIN:
            break
    return transitions


def main() -> None:
    game = CrossingGame(enemy_count=0, rng=random.Random(0))
    transitions = play(game)

    print("=== Gem Crossing Demo ===")
    print("Board:")
    for row in game.board.rows:
        print("  " + " ".join(tile.value for tile in row))
    print("Scenes: " + " -> ".join(scene.value for scene in transitions))
    summary = game.snapshot()
    print(f"Final scene: {summary['scene']}, player at {summary['player']}")


if __name__ == "__main__":
    main()
