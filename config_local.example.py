# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` / environment variables. This file should contain only safe overrides.
"""

# Example: always save tasks when leaving the console
# AUTOSAVE = True

# Example: start with an empty registry even if tasks.json exists
# AUTOLOAD = False
