"""Sort the files of a directory into category folders by extension, once or continuously."""

__version__ = "1.2.1"

__all__ = ["__version__"]