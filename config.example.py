# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Client and server read the same variables; see src/orange_time/config.py.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ORANGE_APP_NAME": "App display name (default: orange time).",
    "ORANGE_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "ORANGE_DATA_DIR": "Local data directory, also holds logs/ (default: .local/orange_time).",
    "ORANGE_TASKS_FILE": "JSON file the server persists tasks to (default: <data_dir>/tasks.json).",
    # Persistence server
    "ORANGE_HOST": "Server bind address (default: 127.0.0.1).",
    "ORANGE_PORT": "Server port (default: 3001).",
    "ORANGE_MAX_BODY_MB": "Largest accepted POST body in MB (default: 50).",
    # Persistence client
    "ORANGE_API_BASE_URL": "Server the console client talks to (default: http://127.0.0.1:<port>).",
    "ORANGE_HTTP_TIMEOUT_SECONDS": "Per-request timeout for fetch/push (default: 10).",
}
