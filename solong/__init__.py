"""A tile-based puzzle game: map validation, move rules, XPM textures and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["colors", "xpm", "gamemap", "game", "render"]