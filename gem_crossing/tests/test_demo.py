import random

from gem_crossing import demo
from gem_crossing.game import CrossingGame, Scene


def test_demo_route_collects_every_gem():
    game = CrossingGame(enemy_count=0, rng=random.Random(0))

    transitions = demo.play(game)

    assert transitions == [Scene.WELCOME, Scene.LEVEL, Scene.WIN]
    assert game.gems == []


def test_demo_prints_summary(capsys):
    demo.main()
    output = capsys.readouterr().out

    assert "=== Gem Crossing Demo ===" in output
    assert "welcome -> level -> win" in output
    assert "w w w w g" in output
