"""Default paths, environment variable names, and API constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "vra-cli"
APP_AUTHOR = "vra-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_VRA_URL = "VRA_URL"
ENV_VRA_USERNAME = "VRA_USERNAME"
ENV_VRA_PASSWORD = "VRA_PASSWORD"
ENV_VRA_TENANT = "VRA_TENANT"
ENV_VRA_PROFILE = "VRA_PROFILE"

# API paths
TOKENS_PATH = "/identity/api/tokens"
RESOURCES_PATH = "/catalog-service/api/consumer/resources"
REQUESTS_PATH = "/catalog-service/api/consumer/requests"

# API defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_PAGE_SIZE = 20

OUTPUT_FORMATS = ("table", "json", "yaml", "csv")
