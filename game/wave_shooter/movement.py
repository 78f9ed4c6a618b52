"""
Per-frame movement: player steering, formation march and bullet flight.
"""

from __future__ import annotations

from typing import List

from .constants import (
    ENEMY_DROP,
    ENEMY_EDGE_MARGIN,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    SCREEN_WIDTH,
)
from .entities import Bullet, Enemy, Player
from .utils import clamp


def move_player(
    player: Player,
    move_left: bool,
    move_right: bool,
    dt: float,
    speed: float = PLAYER_SPEED,
    screen_width: float = SCREEN_WIDTH,
    player_width: float = PLAYER_WIDTH,
):
    """Steer the player; left is applied before right so opposing keys cancel"""
    vx = 0.0
    if move_left:
        vx -= speed
    if move_right:
        vx += speed

    half = player_width * 0.5
    player.x = clamp(player.x + vx * dt, half, screen_width - half)


def move_enemies(enemies: List[Enemy], direction: float, base_speed: float, dt: float):
    """March the whole formation one step in the shared direction"""
    for e in enemies:
        e.direction = direction
        e.update(base_speed, dt)


def apply_edge_reversal(
    enemies: List[Enemy],
    direction: float,
    screen_width: float = SCREEN_WIDTH,
    margin: float = ENEMY_EDGE_MARGIN,
    drop: float = ENEMY_DROP,
) -> float:
    """
    Reverse and drop the formation if any enemy has passed an edge.

    Uses post-move positions only, so an enemy may sit past the edge for the
    frame in which the reversal happens. Only the edge the formation is heading
    towards counts, which keeps a formation that is still outside after turning
    around from flipping back on the next frame. This narrows the plain
    "any enemy outside [margin, width - margin]" rule: an enemy past the
    trailing edge never triggers a reversal.

    Returns the new shared direction.
    """
    left, right = margin, screen_width - margin
    if direction > 0:
        hit_edge = any(e.x > right for e in enemies)
    else:
        hit_edge = any(e.x < left for e in enemies)

    if not hit_edge:
        return direction

    direction = -direction
    for e in enemies:
        e.y += drop
        e.direction = direction
    return direction


def move_bullets(bullets: List[Bullet], dt: float):
    """Advance bullets and drop the ones that left the top of the field"""
    for b in bullets:
        b.update(dt)
    bullets[:] = [b for b in bullets if not b.is_out_of_bounds()]
