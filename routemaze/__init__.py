"""Route finding over weighted location graphs, and maze generation and solving."""

__version__ = "0.1.0"