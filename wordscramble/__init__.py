"""Word scramble game engine: root words, candidate validation, sessions."""

__version__ = "0.1.0"
