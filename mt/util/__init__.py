from .misc import now_iso, format_countdown

__all__ = ["now_iso", "format_countdown"]
