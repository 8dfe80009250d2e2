from .app import AppConfig


__all__ = ["AppConfig"]
