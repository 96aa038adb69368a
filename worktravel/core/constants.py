"""
FILE: worktravel/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - STORAGE_KEY: Storage key holding the serialized item collection
  - MODE_KEY: Storage key holding the active context
  - MODE_WORK / MODE_TRAVEL: Mode strings written under MODE_KEY
  - CONTEXT_LABELS / CONTEXT_PLACEHOLDERS: Display strings per mode
  - CONFIRM_DELETE_TITLE / CONFIRM_DELETE_MESSAGE: Delete prompt text
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Storage keys keep the same names the mobile app used so an exported
    key-value dump can be loaded as-is
"""

# Storage keys
STORAGE_KEY = "@toDos"
MODE_KEY = "@mode"

# Mode values stored under MODE_KEY (anything other than "work" means travel)
MODE_WORK = "work"
MODE_TRAVEL = "travel"

# Field names of one serialized item record
FIELD_TEXT = "text"
FIELD_WORKING = "working"
FIELD_COMPLETED = "completed"

CONTEXT_LABELS = {
    MODE_WORK: "Work",
    MODE_TRAVEL: "Travel",
}

CONTEXT_PLACEHOLDERS = {
    MODE_WORK: "Add a To Do",
    MODE_TRAVEL: "Where do you want to go?",
}

# Delete confirmation
CONFIRM_DELETE_TITLE = "Delete To Do"
CONFIRM_DELETE_MESSAGE = "Are you sure?"
