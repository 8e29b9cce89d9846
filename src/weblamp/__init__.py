"""WebLamp: switch Raspberry Pi GPIO devices from a browser."""

__version__ = "0.1.0"
