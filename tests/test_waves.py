"""Unit tests for wave generation and speed progression."""

import pytest

from game.wave_shooter.constants import ENEMY_SPEED_INCREMENT
from game.wave_shooter.entities import EnemyType
from game.wave_shooter.waves import enemy_type_for, generate_wave, next_wave_speed, wave_rows


pytestmark = pytest.mark.unit


def positions(enemies):
    return [(e.x, e.y) for e in enemies]


class TestGenerateWave:
    def test_wave_1_size(self):
        assert len(generate_wave(1)) == 30

    def test_wave_2_size(self):
        assert len(generate_wave(2)) == 40

    def test_rows_grow_with_wave(self):
        assert [wave_rows(n) for n in (1, 2, 5)] == [3, 4, 7]

    def test_positions(self):
        enemies = generate_wave(1)

        assert (enemies[0].x, enemies[0].y) == (50.0, 100.0)
        # Same column, next row
        assert (enemies[1].x, enemies[1].y) == (50.0, 150.0)
        # Wave 1 has 3 rows, so enemies[3] starts the second column
        assert (enemies[3].x, enemies[3].y) == (110.0, 100.0)
        # Last enemy: column 9, row 2
        assert (enemies[-1].x, enemies[-1].y) == (590.0, 200.0)

    def test_deterministic(self):
        assert positions(generate_wave(3)) == positions(generate_wave(3))
        assert [e.enemy_type for e in generate_wave(3)] == [e.enemy_type for e in generate_wave(3)]

    def test_full_health_and_shared_direction(self):
        for e in generate_wave(2, direction=-1.0):
            assert e.health == e.enemy_type.max_health
            assert e.direction == -1.0


class TestEnemyDistribution:
    def test_wave_1_all_standard(self):
        assert {e.enemy_type for e in generate_wave(1)} == {EnemyType.STANDARD}

    def test_wave_2_rows(self):
        enemies = generate_wave(2)
        assert [e.enemy_type for e in enemies[:4]] == [
            EnemyType.TANK, EnemyType.FAST, EnemyType.STANDARD, EnemyType.STANDARD,
        ]

    def test_swoopers_from_wave_4(self):
        assert enemy_type_for(3, 0) is EnemyType.TANK
        assert enemy_type_for(4, 0) is EnemyType.SWOOPER
        assert enemy_type_for(4, 1) is EnemyType.FAST


class TestSpeedProgression:
    def test_linear_increment(self):
        assert next_wave_speed(50.0) == pytest.approx(50.0 + ENEMY_SPEED_INCREMENT)

    def test_no_cap(self):
        speed = 50.0
        for _ in range(100):
            speed = next_wave_speed(speed, 10.0)
        assert speed == pytest.approx(1050.0)
