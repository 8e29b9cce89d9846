"""
Flask web server exposing the WebLamp pins and a diagnostic pin reader.
"""

import datetime

from flask import Flask, abort, render_template_string

from weblamp.config import TIME_FORMAT
from weblamp.pin_controller import ACTIONS, PinController, UnknownPinError

app = Flask(__name__)

# Hardware is initialised by main.py (controller.begin())
controller = PinController()


# ============== Routes ==============

@app.route('/hello')
def hello():
    """Plain text sanity check."""
    return "Hello World!"


@app.route('/time')
def clock():
    """Show the server's current time."""
    now = datetime.datetime.now()
    return render_template_string(
        CLOCK_HTML,
        title='HELLO!',
        time=now.strftime(TIME_FORMAT)
    )


@app.route('/readPin/<pin>')
def read_pin(pin):
    """Report the level of a single pin, best effort.

    WebLamp output pins are read as they are; any other pin is set up as an
    input before the read.
    """
    try:
        # int() alone would also take "2_4" or non-ASCII digits
        if not (pin.isascii() and pin.isdigit()):
            raise ValueError(f"Not a pin number: {pin!r}")
        if controller.read_pin(int(pin)):
            response = f"Pin number {pin} is high!"
        else:
            response = f"Pin number {pin} is low!"
    except Exception as e:
        app.logger.warning("Reading pin %s failed: %s", pin, e)
        response = f"There was an error reading pin {pin}."

    return render_template_string(
        PIN_HTML,
        title=f"Status of Pin {pin}",
        response=response
    )


@app.route('/')
def index():
    """List every WebLamp device with its current state."""
    return render_template_string(MAIN_HTML, pins=controller.read_states(), message=None)


@app.route('/<int:pin>/<action>')
def action(pin, action):
    """Switch a WebLamp device on, off or toggle it."""
    if action not in ACTIONS:
        abort(404, description=f"Unknown action '{action}'.")

    try:
        message = controller.apply_action(pin, action)
    except UnknownPinError:
        abort(404, description=f"Pin {pin} is not a WebLamp device.")

    app.logger.info("Pin %s: %s", pin, message)
    return render_template_string(MAIN_HTML, pins=controller.read_states(), message=message)


@app.errorhandler(404)
def not_found(error):
    """Render 404s with the same page layout as the rest of the site."""
    return render_template_string(ERROR_HTML, description=error.description), 404


# ============== Page Templates ==============

PAGE_STYLE = """
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #0f0f0f;
            color: #ffffff;
            line-height: 1.5;
        }

        .container {
            max-width: 640px;
            margin: 0 auto;
            padding: 24px;
        }

        a {
            color: #3b82f6;
        }

        .pin-state.on {
            color: #22c55e;
        }

        .pin-state.off {
            color: #a0a0a0;
        }

        .message {
            padding: 12px 16px;
            background: #242424;
            border-radius: 8px;
        }
    </style>
"""

MAIN_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>RPi Web Server</title>
""" + PAGE_STYLE + """
</head>
<body>
    <div class="container">
        <h1>Device Listing and Status</h1>
        <ul>
        {% for pin, record in pins.items() %}
            <li class="pin-status" id="pin-{{ pin }}">
                The {{ record.name }} is currently
                {% if record.state %}
                <strong class="pin-state on">on</strong>
                (<a href="/{{ pin }}/off">turn off</a>)
                {% else %}
                <strong class="pin-state off">off</strong>
                (<a href="/{{ pin }}/on">turn on</a>)
                {% endif %}
                <a href="/{{ pin }}/toggle">toggle</a>
            </li>
        {% endfor %}
        </ul>
        {% if message %}
        <h2 class="message">{{ message }}</h2>
        {% endif %}
    </div>
</body>
</html>
"""

PIN_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{{ title }}</title>
""" + PAGE_STYLE + """
</head>
<body>
    <div class="container">
        <h1>{{ title }}</h1>
        <h2>{{ response }}</h2>
    </div>
</body>
</html>
"""

CLOCK_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{{ title }}</title>
""" + PAGE_STYLE + """
</head>
<body>
    <div class="container">
        <h1>Hello, World!</h1>
        <h2>The date and time on the server is: {{ time }}</h2>
    </div>
</body>
</html>
"""

ERROR_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Not Found</title>
""" + PAGE_STYLE + """
</head>
<body>
    <div class="container">
        <h1>Not Found</h1>
        <h2>{{ description }}</h2>
        <a href="/">Back to device listing</a>
    </div>
</body>
</html>
"""


def run_server(host='0.0.0.0', port=80, debug=False):
    """Run the Flask server, one request at a time."""
    app.run(host=host, port=port, debug=debug, threaded=False)


if __name__ == '__main__':
    controller.begin()
    try:
        run_server(debug=True)
    finally:
        controller.cleanup()
