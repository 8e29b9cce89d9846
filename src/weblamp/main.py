#!/usr/bin/env python3
"""
WebLamp - Raspberry Pi GPIO web server.
Switches devices wired to GPIO pins and reads pin levels from a browser.
"""

import signal
import sys

from weblamp.config import SERVER_HOST, SERVER_PORT, DEBUG
from weblamp.web_server import controller, run_server


def signal_handler(sig, frame):
    """Turn SIGTERM into a normal exit so cleanup runs."""
    sys.exit(0)


def setup():
    """Initialize GPIO pins."""
    signal.signal(signal.SIGTERM, signal_handler)
    controller.begin()
    controller.read_states()
    print(controller.to_string())


def main():
    """Entry point."""
    setup()

    print("=" * 50)
    print("  WebLamp Started")
    print(f"  Web interface: http://localhost:{SERVER_PORT}")
    print("  Press Ctrl+C to stop")
    print("=" * 50)

    # Werkzeug swallows Ctrl+C and returns; SIGTERM arrives as SystemExit
    try:
        run_server(host=SERVER_HOST, port=SERVER_PORT, debug=DEBUG)
    finally:
        print("\nShutting down...")
        controller.cleanup()


if __name__ == "__main__":
    main()
