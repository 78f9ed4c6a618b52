"""
WaveShooterEnv - Gymnasium wrapper around the wave shooter simulation
---------------------------------------------------------------------
- Fixed dt per step, one Simulation per env
- MultiDiscrete action space: [move(3), fire(2)]
- Fire cooldown in steps (the simulation itself fires on every press)
- Vector observation: player/formation state + K lowest enemies
- Reward computed from the events each tick returns
- Arcade window for "human" rendering, opened on first render()
- numpy rasterizer for "rgb_array" frames, no window needed

Quick test:
    python -m game.wave_shooter.shooter_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .constants import FPS, PLAYER_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from .palette import (
    BG,
    BULLET_C,
    BULLET_RADIUS,
    ENEMY_COLORS,
    LINE_C,
    PLAYER_C,
    PLAYER_HALF_HEIGHT,
    enemy_radius,
)
from .simulation import EventType, GameState, InputSnapshot, Simulation, TickResult
from .utils import clamp

DEFAULT_REWARD_CONFIG = {
    "R_POINTS": 0.02,    # per point scored
    "R_HIT": 0.1,        # any bullet landing
    "R_SHOT": 0.01,      # cost per bullet fired
    "R_WAVE": 2.0,       # wave cleared
    "R_TIME": 0.001,     # per step
    "R_GAME_OVER": 5.0,  # defender line breached
}


class WaveShooterEnv(gym.Env):
    """Wave shooter as a Gymnasium environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
        dt: float = 1 / FPS,
        max_steps: int = 6000,
        k_enemies: int = 8,
        shoot_cooldown_steps: int = 10,
        max_enemy_speed: float = 200.0,
        max_wave: int = 10,
        reward_config: Optional[Dict[str, float]] = None,
        **sim_kwargs,
    ):
        super().__init__()

        if obs_mode != "vector":
            raise ValueError(f"Unsupported obs_mode: {obs_mode}")
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.shoot_cooldown_steps = shoot_cooldown_steps
        self.max_enemy_speed = max_enemy_speed
        self.max_wave = max_wave
        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(reward_config)

        self.sim = Simulation(screen_width=width, screen_height=height, **sim_kwargs)

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Formation: player x, direction, speed, wave, cooldown (5)
        # Each enemy: rel pos(2) health fraction(1)
        obs_dim = 5 + self.k_enemies * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._cooldown = 0
        self._kills = 0
        self._shots = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self.sim.reset()
        self._step_count = 0
        self._cooldown = 0
        self._kills = 0
        self._shots = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])

        want_fire = fire == 1 and self._cooldown == 0
        inputs = InputSnapshot(move_left=move == 1, move_right=move == 2, fire=want_fire)
        result = self.sim.tick(inputs, self.dt)

        if want_fire:
            self._cooldown = self.shoot_cooldown_steps
        elif self._cooldown > 0:
            self._cooldown -= 1

        self._kills += len(result.destroyed)
        self._shots += sum(1 for ev in result.events if ev.type is EventType.SHOT_FIRED)

        reward = self._compute_reward(result)

        terminated = self.sim.state is GameState.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        sim = self.sim
        px = sim.player.x / self.width

        obs_parts = [
            px * 2 - 1,
            sim.direction,
            clamp(sim.enemy_speed / self.max_enemy_speed * 2 - 1, -1, 1),
            clamp(sim.wave / self.max_wave * 2 - 1, -1, 1),
            clamp(self._cooldown / max(1, self.shoot_cooldown_steps) * 2 - 1, -1, 1),
        ]

        # Lowest enemies first, they are the closest to the defender line
        lowest = sorted(sim.enemies, key=lambda e: -e.y)
        for i in range(self.k_enemies):
            if i < len(lowest):
                e = lowest[i]
                dx = (e.x - sim.player.x) / self.width
                dy = (e.y - sim.player_y) / self.height
                hp = e.health / e.enemy_type.max_health
                obs_parts += [clamp(dx, -1, 1), clamp(dy, -1, 1), hp * 2 - 1]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, result: TickResult) -> float:
        rc = self.reward_config
        reward = 0.0

        for ev in result.events:
            if ev.type is EventType.SHOT_FIRED:
                reward -= rc["R_SHOT"]
            elif ev.type in (EventType.ENEMY_DAMAGED, EventType.ENEMY_DESTROYED):
                reward += rc["R_HIT"]
            elif ev.type is EventType.WAVE_CLEARED:
                reward += rc["R_WAVE"]
            elif ev.type is EventType.GAME_OVER:
                reward -= rc["R_GAME_OVER"]

        reward += rc["R_POINTS"] * result.points
        reward -= rc["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        lowest = max((e.y for e in self.sim.enemies), default=0.0)
        return {
            "score": self.sim.score,
            "wave": self.sim.wave,
            "enemies_killed": self._kills,
            "shots_fired": self._shots,
            "num_enemies": len(self.sim.enemies),
            "num_bullets": len(self.sim.bullets),
            "line_margin": (self.height - self.sim.defender_line) - lowest,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            from .window import ShooterWindow
            self._window = ShooterWindow(self.sim, int(self.width), int(self.height), interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """
        Rasterize the current snapshot into an (H, W, 3) uint8 frame.
        Uses simulation coordinates directly: row 0 is the top of the field.
        """
        h, w = int(self.height), int(self.width)
        frame = np.empty((h, w, 3), dtype=np.uint8)
        frame[:] = BG
        state = self.sim.snapshot()
        rows, cols = np.ogrid[:h, :w]

        line_y = int(self.sim.screen_height - self.sim.defender_line)
        frame[max(0, line_y - 1):max(0, line_y + 1), :] = LINE_C

        def disc(cx, cy, r, color):
            mask = (cols - cx) ** 2 + (rows - cy) ** 2 <= r * r
            frame[mask] = color

        for x, y, enemy_type, health in state.enemies:
            disc(x, y, enemy_radius(health), ENEMY_COLORS[enemy_type])
        for x, y in state.bullets:
            disc(x, y, BULLET_RADIUS, BULLET_C)

        half = PLAYER_WIDTH * 0.5
        x0 = int(max(0, state.player_x - half))
        x1 = int(min(w, state.player_x + half))
        y0 = int(max(0, state.player_y - PLAYER_HALF_HEIGHT))
        y1 = int(min(h, state.player_y + PLAYER_HALF_HEIGHT))
        frame[y0:y1, x0:x1] = PLAYER_C

        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random-action episode and print its return"""
    env = WaveShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}  "
          f"score: {info['score']}  wave: {info['wave']}  steps: {info['step']}")

    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
