"""A dirt, grass and water cellular automaton on an orbitable sphere."""

__version__ = "0.1.0"
__all__ = ["__version__"]