# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Task file
    "TODO_FILE": "Path of the todo.txt file (default: todo.txt). Overridden by -f.",
    "TODO_BACKUP": "Copy the file to <file>.bak before every change (default: true). -b disables.",
    # External programs
    "TODO_EDITOR": "Editor command for 'edit' (default: $VISUAL, then $EDITOR, then 'editor').",
    "TODO_FINDER": "Fuzzy finder command for 'find' (default: fzf).",
    # Views
    "TODO_QUICK_DAYS": "Days before/after today shown by 'quick' (default: 7).",
    # Logging
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_DIR": "Directory for todo.log with full debug logs (default: unset, no file).",
}
