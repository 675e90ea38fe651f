"""Building blocks for D-Bus wire handling: error codes, I/O values, basic type I/O, nesting limits, SHA-1/HMAC, completion listeners and locks."""

__version__ = "0.1.0"