"""Request builders, response models, errors and WebSocket streaming for the Ironbeam futures trading API."""

__version__ = "0.2.0"