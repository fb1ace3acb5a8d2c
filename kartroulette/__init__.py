"""Random kart racing loadouts, stat bars and shuffled course rotations."""

__version__ = "0.1.0"