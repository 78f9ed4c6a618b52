"""2D Game module - Wave shooter simulation core"""

from .entities import Bullet, Enemy, EnemyType, Player
from .collision import DestroyedEnemy, check_collision, process_collisions
from .waves import generate_wave
from .simulation import (
    EventType,
    GameEvent,
    GameState,
    InputSnapshot,
    RenderState,
    Simulation,
    TickResult,
)
from .shooter_env import WaveShooterEnv, run_random_episode

__all__ = [
    'Bullet',
    'Enemy',
    'EnemyType',
    'Player',
    'DestroyedEnemy',
    'check_collision',
    'process_collisions',
    'generate_wave',
    'EventType',
    'GameEvent',
    'GameState',
    'InputSnapshot',
    'RenderState',
    'Simulation',
    'TickResult',
    'WaveShooterEnv',
    'run_random_episode',
]
