"""sjakk - chess move legality engine with terminal and Qt front ends."""

__version__ = "0.1.0"
