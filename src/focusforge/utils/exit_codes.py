"""
Exit codes for the FocusForge CLI.

Semantic exit codes so scripts can tell what went wrong.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Missing configuration or not signed in
ERROR_CONFIG = 3

# Backend or quote service unreachable / rejected the request
ERROR_NETWORK = 4

# Referenced task not found
ERROR_NOT_FOUND = 5

# Interrupted with Ctrl+C (128 + SIGINT)
ERROR_INTERRUPTED = 130
