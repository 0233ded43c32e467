"""A side-scrolling space shooter with two phases, power-up items and boss fights."""

__version__ = "1.0.0"