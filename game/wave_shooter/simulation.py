"""
Simulation - the per-frame game loop and state machine
------------------------------------------------------
- One Simulation owns all mutable game state for a session
- tick(inputs, dt) advances exactly one frame and always runs to completion
- The host reads snapshot() between ticks for drawing
- Discrete events (shots, hits, kills, wave clears, game over) are returned
  from tick for audio / score / highscore collaborators

Frame order:
    input -> player -> enemies -> edge/drop -> bullets -> cull bullets
    -> collisions -> wave clear -> defender line breach
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from loguru import logger

from .collision import DestroyedEnemy, Hit, process_collisions
from .constants import (
    BULLET_SPAWN_OFFSET,
    BULLET_SPEED,
    COLLISION_RADIUS,
    DEFENDER_LINE,
    ENEMY_DROP,
    ENEMY_EDGE_MARGIN,
    ENEMY_SPEED_INCREMENT,
    INITIAL_ENEMY_SPEED,
    PLAYER_BOTTOM_OFFSET,
    PLAYER_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .entities import Bullet, Enemy, EnemyType, Player
from .movement import apply_edge_reversal, move_bullets, move_enemies, move_player
from .waves import generate_wave, next_wave_speed


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class EventType(str, Enum):
    SHOT_FIRED = "shot_fired"
    ENEMY_DAMAGED = "enemy_damaged"
    ENEMY_DESTROYED = "enemy_destroyed"
    WAVE_CLEARED = "wave_cleared"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class InputSnapshot:
    """Input state for one frame. fire and reset are edge-triggered by the host."""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    reset: bool = False


@dataclass(frozen=True)
class GameEvent:
    type: EventType
    x: float = 0.0
    y: float = 0.0
    points: int = 0
    wave: int = 0
    score: int = 0


@dataclass
class TickResult:
    events: List[GameEvent] = field(default_factory=list)
    destroyed: List[DestroyedEnemy] = field(default_factory=list)

    @property
    def points(self) -> int:
        return sum(d.points for d in self.destroyed)

    @property
    def game_over(self) -> bool:
        return any(ev.type is EventType.GAME_OVER for ev in self.events)


@dataclass(frozen=True)
class RenderState:
    """Read-only copy of everything a renderer needs after a tick"""
    player_x: float
    player_y: float
    enemies: Tuple[Tuple[float, float, EnemyType, int], ...]
    bullets: Tuple[Tuple[float, float], ...]
    score: int
    wave: int
    state: GameState


class Simulation:
    """Wave shooter simulation state and frame stepping"""

    def __init__(
        self,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
        player_speed: float = PLAYER_SPEED,
        bullet_speed: float = BULLET_SPEED,
        initial_enemy_speed: float = INITIAL_ENEMY_SPEED,
        enemy_speed_increment: float = ENEMY_SPEED_INCREMENT,
        enemy_drop: float = ENEMY_DROP,
        edge_margin: float = ENEMY_EDGE_MARGIN,
        collision_radius: float = COLLISION_RADIUS,
        defender_line: float = DEFENDER_LINE,
    ):
        # Arena
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.player_y = screen_height - PLAYER_BOTTOM_OFFSET

        # Gameplay config
        self.player_speed = player_speed
        self.bullet_speed = bullet_speed
        self.initial_enemy_speed = initial_enemy_speed
        self.enemy_speed_increment = enemy_speed_increment
        self.enemy_drop = enemy_drop
        self.edge_margin = edge_margin
        self.collision_radius = collision_radius
        self.defender_line = defender_line

        # World state
        self.player: Player = None  # type: ignore
        self.enemies: List[Enemy] = []
        self.bullets: List[Bullet] = []
        self.direction = 1.0
        self.enemy_speed = initial_enemy_speed
        self.wave = 1
        self.score = 0
        self.state = GameState.PLAYING

        self.reset()

    # ----------------------------
    # Session control
    # ----------------------------

    def reset(self):
        """Start a fresh session at wave 1"""
        self.player = Player(x=self.screen_width * 0.5)
        self.bullets = []
        self.direction = 1.0
        self.enemy_speed = self.initial_enemy_speed
        self.wave = 1
        self.score = 0
        self.state = GameState.PLAYING
        self.enemies = generate_wave(self.wave, direction=self.direction)
        logger.info("Simulation reset")

    def fire(self) -> bool:
        """Spawn a bullet above the player. Ignored unless playing."""
        if self.state is not GameState.PLAYING:
            return False
        b = Bullet(self.player.x, self.player_y - BULLET_SPAWN_OFFSET, speed=self.bullet_speed)
        self.bullets.append(b)
        logger.debug("Bullet fired at ({:.1f}, {:.1f})", b.x, b.y)
        return True

    @property
    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    # ----------------------------
    # Frame step
    # ----------------------------

    def tick(self, inputs: Optional[InputSnapshot] = None, dt: float = 0.0) -> TickResult:
        if inputs is None:
            inputs = InputSnapshot()
        dt = max(0.0, dt)
        result = TickResult()

        if self.state is GameState.GAME_OVER:
            if inputs.reset:
                self.reset()
            return result

        # Input
        if inputs.fire and self.fire():
            result.events.append(GameEvent(EventType.SHOT_FIRED, x=self.player.x, y=self.player_y))

        # Movement
        move_player(self.player, inputs.move_left, inputs.move_right, dt,
                    speed=self.player_speed, screen_width=self.screen_width)
        move_enemies(self.enemies, self.direction, self.enemy_speed, dt)
        self.direction = apply_edge_reversal(
            self.enemies, self.direction,
            screen_width=self.screen_width, margin=self.edge_margin, drop=self.enemy_drop,
        )
        move_bullets(self.bullets, dt)

        # Collisions
        hits: List[Hit] = []
        result.destroyed = process_collisions(self.enemies, self.bullets,
                                              radius=self.collision_radius, hits=hits)
        for h in hits:
            if h.destroyed:
                result.events.append(GameEvent(EventType.ENEMY_DESTROYED, x=h.x, y=h.y,
                                               points=h.enemy_type.points))
            else:
                result.events.append(GameEvent(EventType.ENEMY_DAMAGED, x=h.x, y=h.y))
        self.score += result.points

        # Wave clear, then breach; a freshly spawned grid past the line ends the game this frame
        if not self.enemies:
            self._next_wave()
            result.events.append(GameEvent(EventType.WAVE_CLEARED, wave=self.wave, score=self.score))

        if self._defender_line_breached():
            self.state = GameState.GAME_OVER
            logger.info("Defender line breached on wave {}, final score {}", self.wave, self.score)
            result.events.append(GameEvent(EventType.GAME_OVER, wave=self.wave, score=self.score))

        return result

    def _defender_line_breached(self) -> bool:
        return any(
            e.has_breached_defender_line(self.screen_height, self.defender_line)
            for e in self.enemies
        )

    def _next_wave(self):
        self.wave += 1
        self.enemy_speed = next_wave_speed(self.enemy_speed, self.enemy_speed_increment)
        self.direction = 1.0
        self.enemies = generate_wave(self.wave, direction=self.direction)
        logger.info("Wave {} started, enemy speed {:.1f}", self.wave, self.enemy_speed)

    # ----------------------------
    # Render access
    # ----------------------------

    def snapshot(self) -> RenderState:
        return RenderState(
            player_x=self.player.x,
            player_y=self.player_y,
            enemies=tuple((e.x, e.y, e.enemy_type, e.health) for e in self.enemies),
            bullets=tuple((b.x, b.y) for b in self.bullets),
            score=self.score,
            wave=self.wave,
            state=self.state,
        )
