"""Tests for the RL glue: the DQN action wrapper and the metrics callback."""

import csv
import os

import pytest

pytest.importorskip("stable_baselines3")

from game.wave_shooter import WaveShooterEnv
from rl.metrics_callback import MetricsCallback
from rl.train import MultiDiscreteToDiscreteWrapper


pytestmark = pytest.mark.unit


@pytest.fixture
def wrapped():
    e = MultiDiscreteToDiscreteWrapper(WaveShooterEnv())
    yield e
    e.close()


class TestActionWrapper:
    def test_flat_space_size(self, wrapped):
        assert wrapped.action_space.n == 6

    def test_flat_to_move_fire(self, wrapped):
        # fire varies fastest: flat = move * 2 + fire
        for a in range(6):
            assert list(wrapped.action(a)) == [a // 2, a % 2]

    def test_every_pair_reached_once(self, wrapped):
        pairs = [tuple(int(v) for v in wrapped.action(a)) for a in range(6)]
        assert sorted(pairs) == [(m, f) for m in range(3) for f in range(2)]

    def test_steps_through_wrapper(self, wrapped):
        wrapped.reset(seed=0)
        _, _, terminated, truncated, info = wrapped.step(1)
        assert info["shots_fired"] == 1
        assert not terminated and not truncated


class TestMetricsCallback:
    def _finish_episode(self, cb, info, done=True):
        cb.locals = {"infos": [info], "dones": [done]}
        assert cb._on_step() is True

    def test_episode_row_written(self, tmp_path):
        cb = MetricsCallback(log_dir=str(tmp_path), algo_name="dqn", verbose=0)
        cb._on_training_start()
        self._finish_episode(cb, {
            "episode": {"r": 1.5, "l": 10},
            "score": 30,
            "enemies_killed": 3,
            "wave": 2,
            "shots_fired": 6,
        })
        cb._on_training_end()

        with open(os.path.join(str(tmp_path), "dqn_metrics.csv"), newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 1
        row = rows[0]
        assert row["episode"] == "1"
        assert float(row["reward"]) == 1.5
        assert row["length"] == "10"
        assert row["score"] == "30"
        assert row["kills"] == "3"
        assert row["wave"] == "2"
        assert float(row["accuracy"]) == pytest.approx(0.5)

        summary = cb.get_summary()
        assert summary["total_episodes"] == 1
        assert summary["max_wave"] == 2
        assert summary["mean_score"] == 30

    def test_ignores_unfinished_steps(self, tmp_path):
        cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
        cb._on_training_start()
        self._finish_episode(cb, {"score": 10}, done=False)
        self._finish_episode(cb, {"score": 10}, done=True)
        cb._on_training_end()
        assert cb.get_summary() == {}

    def test_no_shots_means_zero_accuracy(self, tmp_path):
        cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
        cb._on_training_start()
        self._finish_episode(cb, {"episode": {"r": -1.0, "l": 5}})
        cb._on_training_end()

        with open(os.path.join(str(tmp_path), "ppo_metrics.csv"), newline="") as f:
            row = next(csv.DictReader(f))
        assert float(row["accuracy"]) == 0.0
        assert row["wave"] == "1"
