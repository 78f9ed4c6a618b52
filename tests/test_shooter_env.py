"""Tests for the Gymnasium wrapper around the simulation."""

import numpy as np
import pytest

from game.wave_shooter.constants import DEFENDER_LINE, SCREEN_HEIGHT
from game.wave_shooter.entities import Enemy, EnemyType
from game.wave_shooter.palette import BG, BULLET_C, ENEMY_COLORS, LINE_C, PLAYER_C
from game.wave_shooter.shooter_env import DEFAULT_REWARD_CONFIG, WaveShooterEnv
from game.wave_shooter.simulation import GameState


pytestmark = pytest.mark.unit

LINE_ROW = int(SCREEN_HEIGHT - DEFENDER_LINE)
STAY = np.array([0, 0])
STAY_FIRE = np.array([0, 1])


@pytest.fixture
def env():
    e = WaveShooterEnv()
    yield e
    e.close()


class TestSpaces:
    def test_reset_observation(self, env):
        obs, info = env.reset(seed=0)
        assert obs.shape == (5 + 8 * 3,)
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["wave"] == 1
        assert info["score"] == 0
        assert info["num_enemies"] == 30

    def test_action_space(self, env):
        assert list(env.action_space.nvec) == [3, 2]

    def test_padding_when_few_enemies(self, env):
        env.reset()
        env.sim.enemies = [Enemy(400.0, 200.0)]
        obs = env._get_obs()
        assert np.all(obs[5 + 3:] == 0.0)

    def test_unknown_obs_mode(self):
        with pytest.raises(ValueError):
            WaveShooterEnv(obs_mode="pixels")


class TestStep:
    def test_step_contract(self, env):
        env.reset(seed=0)
        obs, reward, terminated, truncated, info = env.step(STAY)
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
        assert terminated is False
        assert truncated is False
        assert info["step"] == 1

    def test_fire_cooldown(self, env):
        env.reset()
        env.step(STAY_FIRE)
        env.step(STAY_FIRE)
        assert env._get_info()["shots_fired"] == 1
        assert len(env.sim.bullets) == 1

        for _ in range(env.shoot_cooldown_steps):
            env.step(STAY)
        env.step(STAY_FIRE)
        assert env._get_info()["shots_fired"] == 2

    def test_shot_costs_reward(self, env):
        env.reset()
        _, reward, _, _, _ = env.step(STAY_FIRE)
        expected = -DEFAULT_REWARD_CONFIG["R_SHOT"] - DEFAULT_REWARD_CONFIG["R_TIME"]
        assert reward == pytest.approx(expected)

    def test_breach_terminates(self, env):
        env.reset()
        env.sim.enemies = [Enemy(400.0, SCREEN_HEIGHT - DEFENDER_LINE + 1.0)]
        _, reward, terminated, _, _ = env.step(STAY)
        assert terminated is True
        assert env.sim.state is GameState.GAME_OVER
        assert reward < -DEFAULT_REWARD_CONFIG["R_GAME_OVER"] + 0.1

    def test_truncation(self):
        env = WaveShooterEnv(max_steps=2)
        env.reset()
        assert env.step(STAY)[3] is False
        assert env.step(STAY)[3] is True

    def test_reset_restores_session(self, env):
        env.reset()
        env.sim.enemies = [Enemy(400.0, SCREEN_HEIGHT - DEFENDER_LINE + 1.0)]
        env.step(STAY)
        env.reset()
        assert env.sim.state is GameState.PLAYING
        assert len(env.sim.enemies) == 30
        assert env._get_info()["step"] == 0

    def test_reward_config_override(self):
        env = WaveShooterEnv(reward_config={"R_TIME": 0.0, "R_SHOT": 0.0})
        env.reset()
        _, reward, _, _, _ = env.step(STAY_FIRE)
        assert reward == 0.0

    def test_rgb_array_render(self):
        env = WaveShooterEnv(render_mode="rgb_array")
        env.reset()
        frame = env.render()
        assert frame.shape == (600, 800, 3)
        assert frame.dtype == np.uint8
        # player centre, first enemy centre, defender line row, empty field
        assert tuple(frame[550, 400]) == PLAYER_C
        assert tuple(frame[100, 50]) == ENEMY_COLORS[EnemyType.STANDARD]
        assert tuple(frame[LINE_ROW, 5]) == LINE_C
        assert tuple(frame[300, 790]) == BG

    def test_rgb_array_follows_defender_line_override(self):
        env = WaveShooterEnv(render_mode="rgb_array", defender_line=150.0)
        env.reset()
        frame = env.render()
        assert tuple(frame[450, 5]) == LINE_C
        assert tuple(frame[LINE_ROW, 5]) == BG

    def test_rgb_array_draws_bullets(self):
        env = WaveShooterEnv(render_mode="rgb_array")
        env.reset()
        env.step(STAY_FIRE)
        bx, by = env.sim.bullets[0].x, env.sim.bullets[0].y
        frame = env.render()
        assert tuple(frame[int(by), int(bx)]) == BULLET_C
