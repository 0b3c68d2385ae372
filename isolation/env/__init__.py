"""Gymnasium environment wrapping the game engine."""

from .gym_env import DEFAULT_AI_DEPTH, IsolationEnv

__all__ = ["DEFAULT_AI_DEPTH", "IsolationEnv"]
