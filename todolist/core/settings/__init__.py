from .settings import TodoSettings, get_settings

__all__ = ["TodoSettings", "get_settings"]
