from .log_manager import LogManager

__all__ = ["LogManager"]
