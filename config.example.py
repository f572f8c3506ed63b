# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening taskkeeper/config.py.
"""

ENV_VARS = {
    # App / logging
    "TASKKEEPER_APP_NAME": "App display name (default: Task Manager).",
    "TASKKEEPER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Store
    "TASKKEEPER_SEED_SAMPLE_TASKS": "Start with the four sample tasks (true/false, default: true).",
    # Presentation
    "TASKKEEPER_CONSOLE_ENABLED": "Run the interactive console; otherwise print the list once (default: true).",
    # Paths (gitignored)
    "TASKKEEPER_DATA_DIR": "Local data directory holding taskkeeper.log (default: .local/taskkeeper).",
}
