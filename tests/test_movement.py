"""Unit tests for player, formation and bullet movement."""

import pytest

from game.wave_shooter.constants import ENEMY_DROP, ENEMY_EDGE_MARGIN, PLAYER_WIDTH, SCREEN_WIDTH
from game.wave_shooter.entities import Bullet, Enemy, EnemyType, Player
from game.wave_shooter.movement import apply_edge_reversal, move_bullets, move_enemies, move_player


pytestmark = pytest.mark.unit


class TestMovePlayer:
    def test_left(self):
        p = Player(400.0)
        move_player(p, True, False, 0.1, speed=300.0)
        assert p.x == pytest.approx(370.0)

    def test_right(self):
        p = Player(400.0)
        move_player(p, False, True, 0.1, speed=300.0)
        assert p.x == pytest.approx(430.0)

    def test_opposing_keys_cancel(self):
        p = Player(400.0)
        move_player(p, True, True, 0.1)
        assert p.x == 400.0

    def test_clamped_to_field(self):
        p = Player(400.0)
        move_player(p, False, True, 100.0)
        assert p.x == SCREEN_WIDTH - PLAYER_WIDTH / 2

        move_player(p, True, False, 100.0)
        assert p.x == PLAYER_WIDTH / 2


class TestFormation:
    def test_shared_speed_with_type_multiplier(self):
        enemies = [
            Enemy(100.0, 100.0, enemy_type=EnemyType.STANDARD),
            Enemy(100.0, 150.0, enemy_type=EnemyType.FAST),
            Enemy(100.0, 200.0, enemy_type=EnemyType.TANK),
        ]
        move_enemies(enemies, 1.0, 50.0, 1.0)
        assert [e.x for e in enemies] == pytest.approx([150.0, 175.0, 135.0])

    def test_formation_direction_overrides_entity(self):
        enemies = [Enemy(100.0, 100.0, direction=1.0)]
        move_enemies(enemies, -1.0, 50.0, 1.0)
        assert enemies[0].x == pytest.approx(50.0)
        assert enemies[0].direction == -1.0

    def test_reverse_and_drop_at_right_edge(self):
        right = SCREEN_WIDTH - ENEMY_EDGE_MARGIN
        enemies = [Enemy(right + 1.0, 100.0), Enemy(400.0, 150.0)]

        direction = apply_edge_reversal(enemies, 1.0)
        assert direction == -1.0
        assert [e.y for e in enemies] == [100.0 + ENEMY_DROP, 150.0 + ENEMY_DROP]
        assert all(e.direction == -1.0 for e in enemies)

    def test_reverse_and_drop_at_left_edge(self):
        enemies = [Enemy(ENEMY_EDGE_MARGIN - 1.0, 100.0)]
        assert apply_edge_reversal(enemies, -1.0) == 1.0
        assert enemies[0].y == 100.0 + ENEMY_DROP

    def test_inside_bounds_no_change(self):
        enemies = [Enemy(400.0, 100.0)]
        assert apply_edge_reversal(enemies, 1.0) == 1.0
        assert enemies[0].y == 100.0

    def test_no_second_flip_while_returning(self):
        # Still past the right edge but already heading left
        enemies = [Enemy(SCREEN_WIDTH - ENEMY_EDGE_MARGIN + 5.0, 120.0, direction=-1.0)]
        assert apply_edge_reversal(enemies, -1.0) == -1.0
        assert enemies[0].y == 120.0

    def test_empty_formation(self):
        assert apply_edge_reversal([], 1.0) == 1.0


class TestMoveBullets:
    def test_moves_and_culls(self):
        bullets = [Bullet(100.0, 10.0), Bullet(200.0, 300.0)]
        move_bullets(bullets, 0.1)
        assert len(bullets) == 1
        assert bullets[0].x == 200.0
        assert bullets[0].y == pytest.approx(250.0)
