"""Personal trading journal: trades, positions, realized P/L and notes."""

__version__ = "0.1.0"
