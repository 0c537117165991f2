# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "CHATTERBOX_APP_NAME": "Name shown in the welcome banner (default: Chatterbox).",
    "CHATTERBOX_LOG_LEVEL": "Console logging level (default: WARNING).",
    "CHATTERBOX_LOG_TO_FILE": "Also write a full DEBUG log to <data dir>/chatterbox.log (default: true).",
    # Local data paths
    "CHATTERBOX_DATA_DIR": "Directory for the task file and the log (default: ./data).",
    "CHATTERBOX_TASKS_FILE": "Task file path (default: <data dir>/chatterbox.txt).",
}

# Example .env:
#
# CHATTERBOX_APP_NAME=Chatterbox
# CHATTERBOX_LOG_LEVEL=INFO
# CHATTERBOX_DATA_DIR=./data
