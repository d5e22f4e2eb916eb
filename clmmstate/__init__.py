"""State accounts, tick arrays and rule checks for a concentrated-liquidity exchange."""

__version__ = "0.1.0"