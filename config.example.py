# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional. The save file can also be passed as the first command-line argument:

    taskpad ~/notes/tasks.txt

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "Name used in the greeting (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKPAD_LOG_TO_FILE": "Write full DEBUG logs to <log_dir>/taskpad.log (true/false, default: true).",
    # Paths
    "TASKPAD_DATA_DIR": "Local data directory (default: data).",
    "TASKPAD_TASKS_FILE": "Save file path (default: <data_dir>/taskpad.txt).",
    "TASKPAD_LOG_DIR": "Log directory (default: <data_dir>/logs).",
}
