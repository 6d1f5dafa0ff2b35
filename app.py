# app.py
import os
import logging
import sys
from typing import Any, Optional
from urllib.parse import urlparse

# Flask imports
from flask import Flask, request, jsonify, render_template
from flask_cors import CORS

# Dotenv for loading environment variables
from dotenv import load_dotenv

# --- Initial Environment Variable Load (must be at the very top for global access) ---
load_dotenv()

from jsonplaceholder.client import get_jsonplaceholder_client
from jsonplaceholder.tools import JSONPLACEHOLDER_ENDPOINTS, JSONPLACEHOLDER_SERVER_URL
from viewmodels.presentation import Panel
from viewmodels.screens import SCREEN_CONFIG, Screen


# --- Global Flask Application Setup ---
app = Flask(__name__)
CORS(app)

# --- Logging Configuration ---
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# --- Application Configuration from Environment Variables ---
FLASK_APP_NAME = os.environ.get("FLASK_APP_NAME", "JSONPlaceholder_Explorer")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3010))
FLASK_DEBUG = os.environ.get("FLASK_DEBUG", "False").lower() in ('true', '1', 't')

JSONPLACEHOLDER_BASE_URL = os.environ.get("JSONPLACEHOLDER_BASE_URL", JSONPLACEHOLDER_SERVER_URL)

GUNICORN_TIMEOUT = int(os.environ.get("GUNICORN_TIMEOUT", 120))
GUNICORN_WORKERS = int(os.environ.get("GUNICORN_WORKERS", 2))

# Each request builds its own client; tests swap this factory for one backed by a mock transport.
app.config["CLIENT_FACTORY"] = lambda: get_jsonplaceholder_client(JSONPLACEHOLDER_BASE_URL)


# --- Pre-flight Checks ---
def perform_preflight_checks():
    logger.info("Performing pre-flight checks...")

    parsed = urlparse(JSONPLACEHOLDER_BASE_URL)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        logger.error(f"JSONPLACEHOLDER_BASE_URL must be an http(s) URL, got '{JSONPLACEHOLDER_BASE_URL}'.")
        sys.exit(1)

    if parsed.scheme != "https":
        logger.warning(f"JSONPLACEHOLDER_BASE_URL is not https: '{JSONPLACEHOLDER_BASE_URL}'.")

    logger.info("Essential configuration variables checked successfully.")


# --- Initialization Function ---
def initialize_all_components():
    """Logs the endpoint table and the screens served by this instance."""
    logger.info(f"JSONPlaceholder base URL: {JSONPLACEHOLDER_BASE_URL}")
    for operation_id, path in JSONPLACEHOLDER_ENDPOINTS.items():
        logger.info(f"Endpoint {operation_id}: GET {path}")
    logger.info(f"Screens initialized: {', '.join(SCREEN_CONFIG)}")


# --- Screen Handling Logic ---
async def load_screen(name: str, identity: Any = None) -> Screen:
    """
    Builds a screen for this request, triggers it with the route parameter and
    waits for its terminal state. Fetch failures end up in the screen state;
    anything else propagates to the route.
    """
    query = request.args.get("q", "")
    async with app.config["CLIENT_FACTORY"]() as client:
        screen = Screen(name, client)
        await screen.load(identity, query)
    logger.info(f"Screen '{name}' (id={identity!r}, q={query!r}) resolved to panel '{screen.panel.value}'")
    return screen


async def render_screen(name: str, identity: Optional[int] = None):
    try:
        screen = await load_screen(name, identity)
    except Exception as e:
        logger.exception(f"An unhandled error occurred while rendering screen '{name}':")
        return render_template("error.html", message=f"An internal server error occurred: {e}"), 500

    status = 502 if screen.panel is Panel.ERROR else 200
    return render_template(screen.config["template"], retry_url=request.full_path.rstrip("?"), **screen.context()), status


async def screen_json(name: str, identity: Optional[int] = None):
    try:
        screen = await load_screen(name, identity)
    except Exception as e:
        logger.exception(f"An unhandled error occurred in the '{name}' JSON endpoint:")
        return jsonify({"status": "error", "message": f"An internal server error occurred: {e}"}), 500

    status = 502 if screen.panel is Panel.ERROR else 200
    return jsonify(screen.to_dict()), status


# --- Flask Routes ---

@app.route("/")
def index():
    """Renders the home page."""
    return render_template("home.html")


@app.route("/posts")
async def posts():
    return await render_screen("posts")


@app.route("/posts/<int(signed=True):post_id>")
async def post_detail(post_id: int):
    return await render_screen("post_detail", post_id)


@app.route("/users")
async def users():
    return await render_screen("users")


@app.route("/users/<int(signed=True):user_id>")
async def user_detail(user_id: int):
    return await render_screen("user_detail", user_id)


@app.route("/api/posts")
async def api_posts():
    """JSON mirror of the posts screen; honours ?q= like the HTML view."""
    return await screen_json("posts")


@app.route("/api/posts/<int(signed=True):post_id>")
async def api_post_detail(post_id: int):
    return await screen_json("post_detail", post_id)


@app.route("/api/users")
async def api_users():
    return await screen_json("users")


@app.route("/api/users/<int(signed=True):user_id>")
async def api_user_detail(user_id: int):
    return await screen_json("user_detail", user_id)


@app.route('/health', methods=['GET'])
def health_check():
    """Provides a simple health check endpoint."""
    return jsonify({"status": "healthy", "message": f"{FLASK_APP_NAME} is running"}), 200


def run_server():
    """Serves the app with gunicorn, or Flask's development server when FLASK_DEBUG is set."""
    perform_preflight_checks()
    initialize_all_components()

    logger.info(f"Starting {FLASK_APP_NAME} on {HOST}:{PORT}")
    if FLASK_DEBUG:
        logger.warning("FLASK_DEBUG is set. Using Flask's development server. Do not use in production.")
        app.run(host=HOST, port=PORT, debug=True)
        return

    from gunicorn.app.base import BaseApplication

    class StandaloneApplication(BaseApplication):
        def __init__(self, app, options=None):
            self.options = options or {}
            self.application = app
            super().__init__()

        def load_config(self):
            for key, value in self.options.items():
                if key in self.cfg.settings and value is not None:
                    self.cfg.set(key.lower(), value)

        def load(self):
            return self.application

    gunicorn_options = {
        'bind': f"{HOST}:{PORT}",
        'workers': GUNICORN_WORKERS,
        'timeout': GUNICORN_TIMEOUT,
        'loglevel': LOG_LEVEL.lower(),
    }
    try:
        StandaloneApplication(app, gunicorn_options).run()
    except Exception as e:
        logger.critical(f"Failed to start application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run_server()
