# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Example .env:
    TASKLIST_STORE=file
    TASKLIST_TASKS_PATH=~/tasks.txt
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_TO_FILE": "Also write a debug log to <data_dir>/tasklist.log (default: true).",
    # Storage
    "TASKLIST_STORE": "Task store backend: memory | file (default: memory).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_TASKS_PATH": "Task file for the file backend (default: <data_dir>/tasks.txt).",
}
