# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "NEBULA_APP_NAME": "App display name (default: nebula).",
    "NEBULA_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Behaviour
    "NEBULA_LOAD_ON_START": "Load the tasks file at startup (true/false, default: false).",
    "NEBULA_COLOR": "Coloured output (true/false; default: true unless NO_COLOR is set).",
    # Paths
    "NEBULA_DATA_DIR": "Directory for nebula.log (default: .local/nebula).",
    "NEBULA_TASKS_PATH": "Tasks JSON file (default: tasks.json in the working directory).",
}
