# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. Only the names below are read.
"""

# Example: always start from the saved tasks
# LOAD_ON_START = True

# Example: keep the tasks file in a fixed place
# TASKS_PATH = "/home/me/notes/tasks.json"
