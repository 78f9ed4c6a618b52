"""
Wave generation and difficulty progression.

A wave is a grid of ``WAVE_BASE_ROWS + wave`` rows by ``WAVE_COLUMNS``
columns, built column by column (all rows of column 0 first). Wave 1 is all
standard enemies; from wave 2 on the top rows get tougher archetypes:

    row 0   tank (swooper from wave 4)
    row 1   fast
    rest    standard
"""

from __future__ import annotations

from typing import List

from loguru import logger

from .constants import (
    ENEMY_SPEED_INCREMENT,
    GRID_ORIGIN_X,
    GRID_ORIGIN_Y,
    GRID_SPACING_X,
    GRID_SPACING_Y,
    WAVE_BASE_ROWS,
    WAVE_COLUMNS,
)
from .entities import Enemy, EnemyType


def wave_rows(wave: int) -> int:
    return WAVE_BASE_ROWS + max(1, wave)


def enemy_type_for(wave: int, row: int) -> EnemyType:
    """Archetype of the enemy placed in ``row`` of ``wave``"""
    if wave < 2:
        return EnemyType.STANDARD
    if row == 0:
        return EnemyType.SWOOPER if wave >= 4 else EnemyType.TANK
    if row == 1:
        return EnemyType.FAST
    return EnemyType.STANDARD


def generate_wave(
    wave: int,
    direction: float = 1.0,
    columns: int = WAVE_COLUMNS,
    origin_x: float = GRID_ORIGIN_X,
    origin_y: float = GRID_ORIGIN_Y,
    spacing_x: float = GRID_SPACING_X,
    spacing_y: float = GRID_SPACING_Y,
) -> List[Enemy]:
    """Build the enemy grid for a (1-based) wave number"""
    rows = wave_rows(wave)
    logger.info("Generating wave {} with {} enemies ({} rows x {} columns)",
                wave, rows * columns, rows, columns)

    enemies = []
    for i in range(columns):
        for j in range(rows):
            enemies.append(Enemy(
                x=origin_x + i * spacing_x,
                y=origin_y + j * spacing_y,
                direction=direction,
                enemy_type=enemy_type_for(wave, j),
            ))
    return enemies


def next_wave_speed(base_speed: float, increment: float = ENEMY_SPEED_INCREMENT) -> float:
    """Base formation speed after a wave clear (linear, uncapped)"""
    return base_speed + increment
