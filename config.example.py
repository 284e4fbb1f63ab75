# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKORDER_APP_NAME": "App display name (default: taskorder).",
    "TASKORDER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TASKORDER_DATA_DIR": "Local data directory (default: .local/taskorder).",
    "TASKORDER_TASKS_PATH": "Saved tasks JSON file (default: <data_dir>/tasks.json).",
    "TASKORDER_EXECUTION_LOG_PATH": (
        "Executed-task log file (default: <data_dir>/tasks_log.txt)."
    ),
    # Session
    "TASKORDER_AUTOLOAD": "Load saved tasks at startup (true/false, default: true).",
    "TASKORDER_AUTOSAVE": "Save tasks on exit (true/false, default: false).",
}
