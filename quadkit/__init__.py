"""Engine-free game logic: platformer physics, particle effect configuration and small game simulations."""

__version__ = "0.1.0"

__all__ = [
    "angles",
    "arkanoid",
    "asteroids",
    "curves",
    "emitter_config",
    "geometry",
    "life",
    "platformer",
    "snake",
]