APP_ORG = "QuickTools"
APP_NAME = "Blueprint Editor"
APP_DIR = "BlueprintEditor"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_RECENTS = "file/recent"
MAX_RECENTS = 8

BLUEPRINT_FILTER = "Blueprints (*.json)"
DEFAULT_BLUEPRINT_NAME = "my-blueprint.json"
DEFAULT_IMPORT_URL = "https://playground.wordpress.net/blueprint-schema.json"
DEFAULT_IMPORT_TIMEOUT = 30.0

# Discard-guard action descriptions, shown as "Are you sure you want to {action}?"
ACTION_QUIT = "quit"
ACTION_OPEN = "open a blueprint"
ACTION_IMPORT = "import a blueprint from a URL"
ACTION_NEW = "create a new blueprint"
