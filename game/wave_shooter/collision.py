"""
Bullet vs enemy collision resolution
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from loguru import logger

from .constants import COLLISION_RADIUS
from .entities import Bullet, Enemy, EnemyType
from .utils import within_radius


class DestroyedEnemy(NamedTuple):
    """Where an enemy died and what it was worth"""
    x: float
    y: float
    points: int


class Hit(NamedTuple):
    """One bullet landing on one enemy"""
    x: float
    y: float
    enemy_type: EnemyType
    destroyed: bool


def check_collision(bullet: Bullet, enemy: Enemy, radius: float = COLLISION_RADIUS) -> bool:
    """Circle test between bullet and enemy centers"""
    return within_radius(bullet.x, bullet.y, enemy.x, enemy.y, radius)


def find_hits(
    enemies: List[Enemy],
    bullets: List[Bullet],
    radius: float = COLLISION_RADIUS,
) -> List[Tuple[int, int]]:
    """
    Pair enemies with the bullet that hits them this frame.

    Each enemy takes at most one bullet: the first one in collection order that
    is in range and not already spent on an earlier enemy.
    Returns (enemy_index, bullet_index) pairs in enemy order.
    """
    spent = set()
    pairs = []
    for ei, e in enumerate(enemies):
        if e.is_destroyed():
            continue
        for bi, b in enumerate(bullets):
            if bi in spent:
                continue
            if check_collision(b, e, radius):
                spent.add(bi)
                pairs.append((ei, bi))
                break
    return pairs


def process_collisions(
    enemies: List[Enemy],
    bullets: List[Bullet],
    radius: float = COLLISION_RADIUS,
    hits: Optional[List[Hit]] = None,
) -> List[DestroyedEnemy]:
    """
    Damage enemies hit by bullets and remove spent bullets and dead enemies.

    Both lists are compacted in place. If ``hits`` is given, every hit of the
    frame (fatal or not) is appended to it.

    Returns the destroyed enemies in the order they were resolved.
    """
    pairs = find_hits(enemies, bullets, radius)
    if not pairs:
        return []

    destroyed: List[DestroyedEnemy] = []
    for ei, _ in pairs:
        e = enemies[ei]
        killed = e.take_damage()
        if hits is not None:
            hits.append(Hit(e.x, e.y, e.enemy_type, killed))
        if killed:
            destroyed.append(DestroyedEnemy(e.x, e.y, e.enemy_type.points))

    spent = {bi for _, bi in pairs}
    enemies[:] = [e for e in enemies if not e.is_destroyed()]
    bullets[:] = [b for i, b in enumerate(bullets) if i not in spent]

    logger.debug("Resolved {} hits, destroyed {} enemies", len(pairs), len(destroyed))
    return destroyed
