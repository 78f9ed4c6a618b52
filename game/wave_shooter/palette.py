"""
Colors and sprite sizes shared by the arcade window and the rgb_array renderer
"""

from .entities import EnemyType

BG = (18, 18, 22)
PLAYER_C = (80, 200, 120)
BULLET_C = (240, 210, 80)
LINE_C = (90, 40, 40)
HUD_C = (220, 220, 220)

ENEMY_COLORS = {
    EnemyType.STANDARD: (220, 80, 80),
    EnemyType.FAST: (240, 170, 60),
    EnemyType.TANK: (150, 110, 220),
    EnemyType.SWOOPER: (80, 200, 220),
}

PLAYER_HALF_HEIGHT = 8
BULLET_RADIUS = 3


def enemy_radius(health: int) -> float:
    """Enemies shrink as they lose health"""
    return 14 + 2 * (health - 1)
