"""
Mock hardware modules for testing WebLamp without a Raspberry Pi.
Simulates the parts of RPi.GPIO the server uses.
"""

import sys
from unittest.mock import MagicMock


class MockGPIO:
    """Mock RPi.GPIO module."""
    BCM = 11
    BOARD = 10
    OUT = 0
    IN = 1
    PUD_UP = 22
    HIGH = 1
    LOW = 0

    # BCM channels RPi.GPIO accepts on a 40-pin header
    VALID_CHANNELS = range(0, 28)

    _pin_states = {}
    _pin_modes = {}

    @classmethod
    def _check_channel(cls, pin):
        if pin not in cls.VALID_CHANNELS:
            raise ValueError("The channel sent is invalid on a Raspberry Pi")

    @classmethod
    def setmode(cls, mode):
        pass

    @classmethod
    def setwarnings(cls, state):
        pass

    @classmethod
    def setup(cls, pin, mode, pull_up_down=None):
        cls._check_channel(pin)
        cls._pin_modes[pin] = mode
        if mode == cls.IN and pull_up_down is None:
            # Floating input keeps whatever level the test wired to it
            cls._pin_states.setdefault(pin, cls.LOW)
        else:
            cls._pin_states[pin] = cls.HIGH if pull_up_down == cls.PUD_UP else cls.LOW

    @classmethod
    def input(cls, pin):
        cls._check_channel(pin)
        if pin not in cls._pin_modes:
            raise RuntimeError("You must setup() the GPIO channel first")
        return cls._pin_states[pin]

    @classmethod
    def output(cls, pin, state):
        cls._check_channel(pin)
        if cls._pin_modes.get(pin) != cls.OUT:
            raise RuntimeError("The GPIO channel has not been set up as an OUTPUT")
        cls._pin_states[pin] = cls.HIGH if state else cls.LOW

    @classmethod
    def cleanup(cls):
        cls._pin_states.clear()
        cls._pin_modes.clear()

    @classmethod
    def set_pin(cls, pin, state):
        """Test helper to set pin state."""
        cls._pin_states[pin] = state

    @classmethod
    def get_mode(cls, pin):
        """Test helper to inspect how a pin was set up."""
        return cls._pin_modes.get(pin)


def install_mocks():
    """Install mock modules into sys.modules."""
    mock_rpi = MagicMock()
    mock_rpi.GPIO = MockGPIO

    sys.modules['RPi'] = mock_rpi
    sys.modules['RPi.GPIO'] = MockGPIO

    return {
        'GPIO': MockGPIO,
    }
