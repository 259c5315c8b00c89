"""Theme system: colors, sizes, and stylesheet generation."""
from .colors import THEMES
from .sizes import SIZES
from .stylesheet import build_stylesheet

__all__ = ["THEMES", "SIZES", "build_stylesheet"]
