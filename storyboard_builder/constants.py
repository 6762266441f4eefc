"""All magic strings, numbers and configuration constants."""

STORAGE_KEY = "storyboards"                  # well-known slot in the store file
STORE_PATH = "storage/storyboards.json"      # default key-value store location
SCRIPT_TITLE = "Created via script"          # title for script-originated storyboards
SCENE_DELIMITER = "---"                      # a line holding only this separates scenes
SCRIPT_LABEL = "script segment:"             # lower-cased voice-over label prefix
VERSION = "0.1.0"
