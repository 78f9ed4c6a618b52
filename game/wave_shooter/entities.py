"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from enum import Enum

from .constants import BULLET_SPEED, DEFENDER_LINE, SCREEN_HEIGHT


class EnemyType(Enum):
    """Enemy archetype; every per-type rule is a lookup on this enum"""
    STANDARD = "standard"
    FAST = "fast"
    TANK = "tank"
    SWOOPER = "swooper"

    @property
    def max_health(self) -> int:
        return _MAX_HEALTH[self]

    @property
    def speed_multiplier(self) -> float:
        return _SPEED_MULTIPLIER[self]

    @property
    def points(self) -> int:
        return _POINTS[self]


_MAX_HEALTH = {
    EnemyType.STANDARD: 1,
    EnemyType.FAST: 1,
    EnemyType.TANK: 3,
    EnemyType.SWOOPER: 1,
}

_SPEED_MULTIPLIER = {
    EnemyType.STANDARD: 1.0,
    EnemyType.FAST: 1.5,
    EnemyType.TANK: 0.7,
    EnemyType.SWOOPER: 1.0,
}

_POINTS = {
    EnemyType.STANDARD: 10,
    EnemyType.FAST: 20,
    EnemyType.TANK: 50,
    EnemyType.SWOOPER: 30,
}


@dataclass
class Player:
    """Player cannon; only moves horizontally"""
    x: float


@dataclass
class Enemy:
    """Enemy in the marching formation"""
    x: float
    y: float
    direction: float = 1.0  # 1.0 right, -1.0 left
    enemy_type: EnemyType = EnemyType.STANDARD
    health: int = field(init=False)

    def __post_init__(self):
        self.health = self.enemy_type.max_health

    def update(self, base_speed: float, dt: float):
        speed = base_speed * self.enemy_type.speed_multiplier
        self.x += self.direction * speed * dt

    def take_damage(self) -> bool:
        """Remove one point of health. Returns True if the enemy is now destroyed."""
        if self.health > 0:
            self.health -= 1
        return self.health == 0

    def is_destroyed(self) -> bool:
        return self.health == 0

    def has_breached_defender_line(self, screen_height: float = SCREEN_HEIGHT,
                                   defender_line: float = DEFENDER_LINE) -> bool:
        return self.y > screen_height - defender_line


@dataclass
class Bullet:
    """Player bullet, travels straight up"""
    x: float
    y: float
    speed: float = BULLET_SPEED

    def update(self, dt: float):
        self.y -= self.speed * dt

    def is_out_of_bounds(self) -> bool:
        return self.y < 0.0
