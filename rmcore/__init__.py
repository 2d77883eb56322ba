"""Core components for a competition robot controller: game types, logging, timing, CRC16, workers, behaviour and serial access."""

__version__ = "0.1.0"