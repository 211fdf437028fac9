"""Core game logic for the gem crossing game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

TILE_WIDTH = 101
TILE_HEIGHT = 83
NUM_ROWS = 6
NUM_COLS = 5

ENEMY_COUNT = 5
ENEMY_LANES = (1, 2, 3)
ENEMY_SPEED_STEP = 100
ENEMY_SPEED_STEPS = 5

DEFAULT_VERTICAL_OFFSET = -23
GEM_VERTICAL_OFFSET = -36

PLAYER_START = (2, 5)

ENEMY_SPRITE = "images/enemy-bug.png"
PLAYER_SPRITE = "images/char-boy.png"

CANONICAL_BOARD = (
    "wwwwg",
    "sssss",
    "swwws",
    "swsss",
    "wgggg",
    "ggggg",
)


class Direction(Enum):
    """Discrete player moves expressed as (column, row) steps."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @staticmethod
    def from_name(name: str) -> "Direction":
        name = name.upper()
        try:
            return Direction[name]
        except KeyError as exc:
            raise ValueError(f"Unknown direction: {name}") from exc


class Scene(Enum):
    """Top-level mode governing update and render behaviour."""

    WELCOME = "welcome"
    LEVEL = "level"
    WIN = "win"


class TileType(Enum):
    WATER = "w"
    STONE = "s"
    GRASS = "g"

    @property
    def lethal(self) -> bool:
        return self is TileType.WATER

    @property
    def sprite(self) -> str:
        return TILE_SPRITES[self]


TILE_SPRITES: Dict[TileType, str] = {
    TileType.WATER: "images/water-block.png",
    TileType.STONE: "images/stone-block.png",
    TileType.GRASS: "images/grass-block.png",
}


class GemColor(Enum):
    GREEN = "green"
    ORANGE = "orange"
    BLUE = "blue"

    @staticmethod
    def from_name(name: object) -> "GemColor":
        """Return the matching colour, falling back to blue for anything else."""

        if isinstance(name, GemColor):
            return name
        try:
            return GemColor(str(name).lower())
        except ValueError:
            return GemColor.BLUE

    @property
    def sprite(self) -> str:
        return GEM_SPRITES[self]


GEM_SPRITES: Dict[GemColor, str] = {
    GemColor.GREEN: "images/Gem Green.png",
    GemColor.ORANGE: "images/Gem Orange.png",
    GemColor.BLUE: "images/Gem Blue.png",
}

# Gems placed on every level entry as (column, row, colour).
GEM_LAYOUT: Tuple[Tuple[int, int, GemColor], ...] = (
    (4, 0, GemColor.BLUE),
    (0, 3, GemColor.GREEN),
    (0, 1, GemColor.ORANGE),
)


class EntityKind(Enum):
    ENEMY = "enemy"
    PLAYER = "player"
    GEM = "gem"


@dataclass(frozen=True)
class GameBoard:
    """Fixed terrain grid indexed ``[row][col]``."""

    rows: Tuple[Tuple[TileType, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "GameBoard":
        parsed: List[Tuple[TileType, ...]] = []
        for row in rows:
            codes = [code for code in row if not code.isspace()]
            try:
                parsed.append(tuple(TileType(code) for code in codes))
            except ValueError as exc:
                raise ValueError(f"Unknown tile code in row {row!r}") from exc
        if not parsed:
            raise ValueError("A board needs at least one row.")
        width = len(parsed[0])
        if any(len(row) != width for row in parsed):
            raise ValueError("All board rows must have the same number of tiles.")
        return cls(rows=tuple(parsed))

    @classmethod
    def canonical(cls) -> "GameBoard":
        return cls.from_rows(CANONICAL_BOARD)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0])

    def tile(self, col: int, row: int) -> TileType:
        return self.rows[row][col]

    def tile_at(self, x: float, y: float) -> TileType:
        """Map a pixel position to the tile underneath it."""

        return self.tile(int(x // TILE_WIDTH), int(y // TILE_HEIGHT))

    def tiles(self) -> Iterator[Tuple[int, int, TileType]]:
        for row_index, row in enumerate(self.rows):
            for col_index, tile in enumerate(row):
                yield row_index, col_index, tile


@dataclass
class Entity:
    """Positioned drawable shared by every game object."""

    x: float
    y: float
    sprite: str
    vertical_offset: int = DEFAULT_VERTICAL_OFFSET

    kind = None  # type: Optional[EntityKind]

    def update(self, dt: float) -> None:
        pass

    def render(self, surface, resources) -> None:
        surface.blit(resources.get(self.sprite), (self.x, self.y + self.vertical_offset))


@dataclass
class Enemy(Entity):
    """Bug sweeping left to right across one of the stone lanes."""

    speed: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    kind = EntityKind.ENEMY

    @classmethod
    def spawn(cls, rng: Optional[random.Random] = None) -> "Enemy":
        enemy = cls(x=0, y=0, sprite=ENEMY_SPRITE, rng=rng or random.Random())
        enemy.reset()
        return enemy

    def reset(self) -> None:
        self.x = -TILE_WIDTH
        self.y = (self.rng.randrange(len(ENEMY_LANES)) + ENEMY_LANES[0]) * TILE_HEIGHT
        self.speed = (self.rng.randrange(ENEMY_SPEED_STEPS) + 1) * ENEMY_SPEED_STEP

    def update(self, dt: float) -> None:
        self.x += self.speed * dt
        if self.x > TILE_WIDTH * NUM_COLS:
            self.reset()


@dataclass
class Player(Entity):
    kind = EntityKind.PLAYER

    @classmethod
    def spawn(cls) -> "Player":
        player = cls(x=0, y=0, sprite=PLAYER_SPRITE)
        player.reset()
        return player

    @property
    def cell(self) -> Tuple[int, int]:
        return int(self.x // TILE_WIDTH), int(self.y // TILE_HEIGHT)

    def reset(self) -> None:
        self.x = TILE_WIDTH * PLAYER_START[0]
        self.y = TILE_HEIGHT * PLAYER_START[1]

    def handle_input(self, direction: Direction) -> None:
        """Step one tile, ignoring moves that would leave the grid."""

        dx, dy = direction.vector
        x = self.x + dx * TILE_WIDTH
        y = self.y + dy * TILE_HEIGHT
        if not 0 <= x <= TILE_WIDTH * (NUM_COLS - 1):
            return
        if not 0 <= y <= TILE_HEIGHT * (NUM_ROWS - 1):
            return
        self.x, self.y = x, y

    def collides(self, other: Entity) -> bool:
        # Same row and the other sprite's midpoint inside our tile span.
        midpoint = other.x + TILE_WIDTH / 2
        return self.y == other.y and self.x <= midpoint <= self.x + TILE_WIDTH


@dataclass
class Gem(Entity):
    color: GemColor = GemColor.BLUE

    kind = EntityKind.GEM

    @classmethod
    def create(cls, x: float, y: float, color: object) -> "Gem":
        resolved = GemColor.from_name(color)
        return cls(
            x=x,
            y=y,
            sprite=resolved.sprite,
            vertical_offset=GEM_VERTICAL_OFFSET,
            color=resolved,
        )


@dataclass
class GameState:
    """Everything the scene controller mutates during a frame."""

    board: GameBoard
    player: Player
    enemies: List[Enemy] = field(default_factory=list)
    gems: List[Gem] = field(default_factory=list)
    scene: Scene = Scene.WELCOME


@dataclass
class CollisionOutcome:
    """What happened during a single collision pass."""

    water: bool = False
    enemy: Optional[Enemy] = None
    collected: List[Gem] = field(default_factory=list)
    won: bool = False

    @property
    def restarted(self) -> bool:
        return self.water or self.enemy is not None


def canonical_gems() -> List[Gem]:
    return [
        Gem.create(TILE_WIDTH * col, TILE_HEIGHT * row, color)
        for col, row, color in GEM_LAYOUT
    ]


class CrossingGame:
    """Scene controller driving the welcome, level and win flow."""

    MESSAGES: Dict[Scene, Tuple[str, str]] = {
        Scene.WELCOME: ("Get all 3 gems!", "(press enter)"),
        Scene.WIN: ("You win! Try again?", "(press enter)"),
    }

    def __init__(
        self,
        state: Optional[GameState] = None,
        *,
        enemy_count: int = ENEMY_COUNT,
        rng: Optional[random.Random] = None,
        board: Optional[GameBoard] = None,
    ) -> None:
        if state is None:
            rng = rng or random.Random()
            state = GameState(
                board=board or GameBoard.canonical(),
                player=Player.spawn(),
                enemies=[Enemy.spawn(rng) for _ in range(enemy_count)],
            )
        self.state = state

    @property
    def scene(self) -> Scene:
        return self.state.scene

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def enemies(self) -> List[Enemy]:
        return self.state.enemies

    @property
    def gems(self) -> List[Gem]:
        return self.state.gems

    @property
    def board(self) -> GameBoard:
        return self.state.board

    # ------------------------------------------------------------------
    # Scene transitions
    def enter_scene(self, scene: Scene) -> None:
        if scene is Scene.LEVEL:
            # Enemies keep sweeping; only gems and the player start over.
            self.state.gems[:] = canonical_gems()
            self.state.player.reset()
        if scene is not self.state.scene:
            logger.debug("Scene %s -> %s", self.state.scene.value, scene.value)
        self.state.scene = scene

    def confirm(self) -> None:
        if self.state.scene is Scene.WELCOME:
            self.enter_scene(Scene.LEVEL)
        elif self.state.scene is Scene.WIN:
            self.enter_scene(Scene.WELCOME)

    def move_player(self, direction: Direction) -> bool:
        """Forward a directional input; only honoured while a level is running."""

        if self.state.scene is not Scene.LEVEL:
            return False
        self.state.player.handle_input(direction)
        return True

    # ------------------------------------------------------------------
    # Simulation
    def update(self, dt: float) -> Optional[CollisionOutcome]:
        if self.state.scene is not Scene.LEVEL:
            return None
        for enemy in self.state.enemies:
            enemy.update(dt)
        return self.check_collisions()

    def check_collisions(self) -> CollisionOutcome:
        outcome = CollisionOutcome()
        player = self.state.player

        if self.state.board.tile_at(player.x, player.y).lethal:
            logger.debug("Player fell into water at %s", player.cell)
            outcome.water = True
            self.enter_scene(Scene.LEVEL)
            return outcome

        for enemy in self.state.enemies:
            if player.collides(enemy):
                logger.debug("Player hit by enemy at %s", player.cell)
                outcome.enemy = enemy
                self.enter_scene(Scene.LEVEL)
                return outcome

        for gem in list(self.state.gems):
            if player.collides(gem):
                self.state.gems.remove(gem)
                outcome.collected.append(gem)
                logger.debug("Collected %s gem, %d left", gem.color.value, len(self.state.gems))
                if not self.state.gems:
                    outcome.won = True
                    self.enter_scene(Scene.WIN)
                    break
        return outcome

    # ------------------------------------------------------------------
    # Presentation
    def message_lines(self) -> Tuple[str, ...]:
        return self.MESSAGES.get(self.state.scene, ())

    def drawables(self) -> Sequence[Entity]:
        """Entities in back-to-front draw order."""

        return [*self.state.gems, *self.state.enemies, self.state.player]

    def render(self, surface, resources) -> None:
        if self.state.scene is not Scene.LEVEL:
            return
        for row, col, tile in self.state.board.tiles():
            surface.blit(resources.get(tile.sprite), (col * TILE_WIDTH, row * TILE_HEIGHT))
        for entity in self.drawables():
            entity.render(surface, resources)

    def snapshot(self) -> Dict[str, object]:
        return {
            "scene": self.state.scene.value,
            "player": self.state.player.cell,
            "gems": [gem.color.value for gem in self.state.gems],
            "enemies": [(enemy.x, enemy.y, enemy.speed) for enemy in self.state.enemies],
        }


def required_sprites() -> List[str]:
    """Sprite ids the game draws, in a stable order for preloading."""

    sprites: List[str] = [TILE_SPRITES[tile] for tile in TileType]
    sprites.extend([ENEMY_SPRITE, PLAYER_SPRITE])
    sprites.extend(GEM_SPRITES[color] for color in GemColor)
    return sprites
