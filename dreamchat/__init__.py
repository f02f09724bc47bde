"""Dream interpretation chat: relay server, response decoder and conversation controller."""

__version__ = "0.1.0"
