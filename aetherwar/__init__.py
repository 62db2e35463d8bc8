"""A side-scrolling arcade shooter: game rules, timers, sprites and a pygame front end."""

__version__ = "3.0.0"
__all__ = ["app", "engine", "entities", "game"]