"""
Evaluation script for trained RL agents
"""

import time
import argparse
from typing import Optional

import numpy as np

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from game.wave_shooter import WaveShooterEnv
from rl.configs.shooter_config import ENV_CONFIG
from rl.train import MultiDiscreteToDiscreteWrapper

ALGORITHMS = {"ppo": PPO, "dqn": DQN}


def _print_results(title: str, rewards, lengths, scores, waves):
    print("\n" + "="*50)
    print(f"{title} ({len(rewards)} episodes):")
    print(f"Mean Reward: {np.mean(rewards):.2f} ± {np.std(rewards):.2f}")
    print(f"Mean Episode Length: {np.mean(lengths):.1f}")
    print(f"Mean Score: {np.mean(scores):.1f}  Best Wave: {max(waves)}")
    print("="*50)


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
    vec_normalize_path: Optional[str] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo' or 'dqn')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
        vec_normalize_path: Path to VecNormalize stats (for PPO)
    """

    if algo not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algo}")
    model = ALGORITHMS[algo].load(model_path)

    render_mode = "human" if render else None
    base_env = WaveShooterEnv(render_mode=render_mode, **ENV_CONFIG)
    wrapped = MultiDiscreteToDiscreteWrapper(base_env) if algo == "dqn" else base_env
    env = DummyVecEnv([lambda: wrapped])

    if vec_normalize_path:
        env = VecNormalize.load(vec_normalize_path, env)
        env.training = False
        env.norm_reward = False

    episode_rewards = []
    episode_lengths = []
    episode_scores = []
    episode_waves = []

    for episode in range(n_episodes):
        if seed is not None:
            env.seed(seed + episode)
        obs = env.reset()

        total_reward = 0.0
        steps = 0
        info = {}

        while True:
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, done, infos = env.step(action)
            total_reward += reward[0]
            steps += 1
            info = infos[0]

            if render:
                time.sleep(base_env.dt)

            if done[0]:
                break

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info.get("score", 0))
        episode_waves.append(info.get("wave", 1))

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {episode_scores[-1]}, "
              f"Wave = {episode_waves[-1]}, Length = {steps}")

    env.close()

    _print_results("Evaluation Results", episode_rewards, episode_lengths,
                   episode_scores, episode_waves)

    return {
        "mean_reward": np.mean(episode_rewards),
        "std_reward": np.std(episode_rewards),
        "mean_length": np.mean(episode_lengths),
        "mean_score": np.mean(episode_scores),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }


def compare_with_random(n_episodes: int = 10, seed: Optional[int] = None):
    """
    Evaluate a random policy baseline
    """
    print("Evaluating random policy baseline...")

    env = WaveShooterEnv(render_mode=None, **ENV_CONFIG)
    env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []
    episode_waves = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])
        episode_waves.append(info["wave"])

    env.close()

    _print_results("Random Policy Results", episode_rewards, episode_lengths,
                   episode_scores, episode_waves)

    return {
        "mean_reward": np.mean(episode_rewards),
        "std_reward": np.std(episode_rewards),
        "mean_length": np.mean(episode_lengths),
        "mean_score": np.mean(episode_scores),
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate trained RL agent")
    parser.add_argument(
        "model_path",
        type=str,
        help="Path to the trained model",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=sorted(ALGORITHMS),
        help="Algorithm used to train the model (default: ppo)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Disable rendering",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--vec-normalize",
        type=str,
        default=None,
        help="Path to VecNormalize stats file (for PPO)",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_model(
        model_path=args.model_path,
        algo=args.algo,
        n_episodes=args.n_episodes,
        render=not args.no_render,
        seed=args.seed,
        vec_normalize_path=args.vec_normalize,
    )

    if args.compare_random:
        print("\n")
        random_results = compare_with_random(
            n_episodes=args.n_episodes,
            seed=args.seed,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
