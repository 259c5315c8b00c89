"""Modal dialogs for Moment Timer."""
from .lobby import LobbyDialog

__all__ = ["LobbyDialog"]
