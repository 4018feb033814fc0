"""The card game War for two players, with a turn log and statistics."""

__version__ = "0.1.0"