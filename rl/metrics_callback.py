"""
Custom callback for tracking task-specific metrics during training.
Records: score, enemies killed, wave reached, shots fired.
"""

import os
import csv
from typing import Dict, List, Any, Optional

import numpy as np
from stable_baselines3.common.callbacks import BaseCallback


class MetricsCallback(BaseCallback):
    """
    Callback to track and log task-specific metrics per episode.
    Saves to CSV for easy plotting.
    """

    def __init__(
        self,
        log_dir: str,
        algo_name: str,
        verbose: int = 1,
    ):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.algo_name = algo_name

        self.episode_rewards: List[float] = []
        self.episode_lengths: List[int] = []
        self.episode_scores: List[int] = []
        self.episode_kills: List[int] = []
        self.episode_waves: List[int] = []

        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def _on_training_start(self) -> None:
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.algo_name}_metrics.csv")

        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow([
            "timestep", "episode", "reward", "length",
            "score", "kills", "wave", "shots", "accuracy",
        ])
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[MetricsCallback] Logging to {self.csv_path}")

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            # Monitor wrapper adds "episode" on the final step
            if done and "episode" in info:
                self._record_episode(info)

        return True

    def _record_episode(self, info: Dict[str, Any]) -> None:
        ep_info = info["episode"]
        score = info.get("score", 0)
        kills = info.get("enemies_killed", 0)
        wave = info.get("wave", 1)
        shots = info.get("shots_fired", 0)
        accuracy = kills / shots if shots else 0.0

        self.episode_rewards.append(ep_info["r"])
        self.episode_lengths.append(ep_info["l"])
        self.episode_scores.append(score)
        self.episode_kills.append(kills)
        self.episode_waves.append(wave)

        if self.csv_writer:
            self.csv_writer.writerow([
                self.num_timesteps,
                len(self.episode_rewards),
                ep_info["r"],
                ep_info["l"],
                score,
                kills,
                wave,
                shots,
                accuracy,
            ])
            self.csv_file.flush()

        if self.verbose > 0 and len(self.episode_rewards) % 10 == 0:
            avg_reward = sum(self.episode_rewards[-10:]) / 10
            print(f"[{self.algo_name}] Episode {len(self.episode_rewards)}, "
                  f"Timestep {self.num_timesteps}, "
                  f"Avg Reward (10 ep): {avg_reward:.2f}, "
                  f"Best Wave: {max(self.episode_waves)}")

    def _on_training_end(self) -> None:
        if self.csv_file:
            self.csv_file.close()
            if self.verbose > 0:
                print(f"[MetricsCallback] Saved {len(self.episode_rewards)} episodes to {self.csv_path}")

    def get_summary(self) -> Dict[str, Any]:
        if not self.episode_rewards:
            return {}

        return {
            "mean_reward": np.mean(self.episode_rewards),
            "std_reward": np.std(self.episode_rewards),
            "mean_length": np.mean(self.episode_lengths),
            "total_episodes": len(self.episode_rewards),
            "mean_score": np.mean(self.episode_scores),
            "mean_kills": np.mean(self.episode_kills),
            "max_wave": int(max(self.episode_waves)),
        }


class TensorboardMetricsCallback(BaseCallback):
    """
    Logs score and wave reached to TensorBoard at the end of every episode.
    """

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            if done and "episode" in info and self.logger:
                self.logger.record("custom/episode_reward", info["episode"]["r"])
                self.logger.record("custom/score", info.get("score", 0))
                self.logger.record("custom/wave", info.get("wave", 1))

        return True
