# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Defaults reproduce the plain console program: tasks.db in the working directory.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TODO_DATA_DIR": "Local data directory for todo.log (default: .local/todo).",
    "TODO_TASKS_FILE": "Flat task file, one task per line (default: tasks.db).",
    # Console
    "TODO_SHOW_HELP": "Print the command list on startup (true/false, default: true).",
}
