"""
Engine Yard CLI Constants

Centralized constants for magic values, defaults, and configuration.
"""

VERSION = "1.0.0"

# API Configuration
DEFAULT_ENDPOINT = "https://cloud.engineyard.com/"
API_PATH = "api/v2/"
API_TOKEN_HEADER = "X-EY-Cloud-Token"
REQUEST_TIMEOUT = 30

# Local Configuration
CONFIG_FILE_PATHS = ("config/ey.yml", "ey.yml")
DEFAULT_EYRC_PATH = "~/.eyrc"
DEFAULT_LOG_DIR = "~/.ey/logs"

# Environment variable overrides
ENV_ENDPOINT = "CLOUD_URL"
ENV_EYRC = "EYRC"
ENV_LOG_DIR = "EY_LOG_DIR"
ENV_DEBUG = "DEBUG"

# Deploy Configuration
DEFAULT_MIGRATE_COMMAND = "rake db:migrate"
RECIPES_DIR = "cookbooks"

# Server-side component
SERVER_SIDE_GEM = "engineyard-serverside"
SERVER_SIDE_VERSION = "1.4.0"
SERVER_SIDE_BIN = "/usr/local/ey_resin/ruby/bin/engineyard-serverside"
SERVER_SIDE_GEM_BIN = "/usr/local/ey_resin/ruby/bin/gem"

# Server-side check exit codes
CHECK_OK = 0
CHECK_OUTDATED = 70
CHECK_MISSING = 104
CHECK_SSH_FAILED = 255

# Log Configuration
LOG_DATE_FORMAT = "%Y-%m-%d"
LOG_TIME_FORMAT = "%H-%M-%S"
