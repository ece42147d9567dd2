"""Shared constants for dev-start."""

from typing import List


# Directory layout
STANDARD_DIRECTORIES: List[str] = ["src", "tests", "docs"]
OPTIONAL_DIRECTORIES: List[str] = ["scripts", "config", "data"]

# Virtual environments
VENV_ACTIVATE_PATH = "bin/activate"
VIRTUAL_ENV_VAR = "VIRTUAL_ENV"
DEFAULT_VENV_NAME = "venv"

# Environment file
ENV_FILE = ".env"

# Web framework named in requirements.txt that implies a dev server on 5000
WEB_FRAMEWORK_REQUIREMENT = "flask"

# Ports
FLASK_PORT = 5000
NODE_PORT = 3000
DJANGO_PORT = 8000
COMPOSE_PORT = 8080
DEFAULT_PORTS: List[int] = [NODE_PORT, FLASK_PORT, DJANGO_PORT, COMPOSE_PORT]


# Symbol constants
SYMBOL_OK = "✅"
SYMBOL_ERROR = "❌"
SYMBOL_WARNING = "⚠️ "
SYMBOL_TIP = "💡"
SYMBOL_INFO = "ℹ️ "
SYMBOL_FOLDER = "📁"
SYMBOL_PYTHON = "🐍"
SYMBOL_SEARCH = "🔍"
SYMBOL_ROCKET = "🚀"

# Indentation for command and detail lines
INDENT = "   "

BANNER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
