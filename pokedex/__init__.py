"""Interactive command-line Pokedex: cache, API data types, commands and prompt."""

__version__ = "0.1.0"
__all__ = ["__version__"]