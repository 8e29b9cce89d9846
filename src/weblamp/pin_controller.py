import RPi.GPIO as GPIO
from weblamp.config import WEBLAMP_PINS

ACTIONS = ('on', 'off', 'toggle')


class UnknownPinError(KeyError):
    """Raised when an action targets a pin that is not in the WebLamp table."""


class PinController:
    def __init__(self, pin_names=None):
        if pin_names is None:
            pin_names = WEBLAMP_PINS

        # Pin records keyed by BCM number, in configuration order
        self.pins = {
            pin: {'name': name, 'state': GPIO.LOW}
            for pin, name in pin_names.items()
        }

    def begin(self):
        """Configure every WebLamp pin as an output driven low."""
        GPIO.setmode(GPIO.BCM)
        GPIO.setwarnings(False)
        for pin in self.pins:
            GPIO.setup(pin, GPIO.OUT)
            GPIO.output(pin, GPIO.LOW)

        print("==================")
        print("   WebLamp Ready  ")
        print("==================")

    def read_states(self):
        """Refresh every pin record from hardware and return the records."""
        for pin, record in self.pins.items():
            record['state'] = GPIO.input(pin)
        return self.pins

    def get_name(self, pin):
        try:
            return self.pins[pin]['name']
        except KeyError:
            raise UnknownPinError(pin) from None

    def turn_on(self, pin):
        name = self.get_name(pin)
        GPIO.output(pin, GPIO.HIGH)
        return f"Turned {name} on."

    def turn_off(self, pin):
        name = self.get_name(pin)
        GPIO.output(pin, GPIO.LOW)
        return f"Turned {name} off."

    def toggle(self, pin):
        name = self.get_name(pin)
        GPIO.output(pin, GPIO.LOW if GPIO.input(pin) else GPIO.HIGH)
        return f"Toggled {name}."

    def apply_action(self, pin, action):
        """Run an on/off/toggle action and return the status message."""
        if action == 'on':
            return self.turn_on(pin)
        if action == 'off':
            return self.turn_off(pin)
        if action == 'toggle':
            return self.toggle(pin)
        raise ValueError(f"Unknown action: {action}")

    def read_pin(self, pin):
        """Read the logic level of any pin.

        Pins outside the WebLamp table are configured as inputs first;
        WebLamp outputs are read in place so they keep driving their device.
        Errors from the GPIO library propagate to the caller.
        """
        if pin not in self.pins:
            GPIO.setup(pin, GPIO.IN)
        return bool(GPIO.input(pin))

    def to_string(self):
        """Return string representation for debugging."""
        return " | ".join(
            f"[{pin}] {record['name']}={'HIGH' if record['state'] else 'LOW'}"
            for pin, record in self.pins.items()
        )

    def cleanup(self):
        """Release every GPIO channel used by this process."""
        GPIO.cleanup()
