"""relayctl — event dispatch and realtime channel authorization."""

__version__ = "0.3.0"
