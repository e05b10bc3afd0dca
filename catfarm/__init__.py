"""Core of a cat-farm tower defense game: saves, leaderboard, sprites, animation and screen selection."""

__version__ = "0.1.0"