# Raspberry Pi WebLamp Configuration

import os

# ---------- GPIO Pin Definitions ----------
# BCM numbering, pin -> device name (listing order follows this table)
WEBLAMP_PINS = {
    24: "coffee maker",
    25: "lamp",
}

# ---------- Web Server Settings ----------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = int(os.getenv("WEBLAMP_PORT", "80"))  # port 80 needs root
DEBUG = False

# ---------- Page Settings ----------
TIME_FORMAT = "%Y-%m-%d %H:%M"
