"""openai_binding.config.defaults
==============================

Central place for small, stable default values used by the client. These
defaults can be overridden via the external config file, environment
variables or constructor arguments.

This module intentionally avoids importing from other binding packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# Public API root; every endpoint path is appended to it.
DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Value of the OpenAI-Beta header sent on assistants, threads, messages and runs.
ASSISTANTS_BETA_HEADER = "assistants=v1"

# Pool discriminator for the shared httpx client.
HTTP_POOL_PURPOSE = "api"

# Polling cadence used by wait_for_run when the caller does not pass one.
DEFAULT_RUN_POLL_INTERVAL_SECONDS = 1.0

# Env variable naming an optional JSON/YAML config file.
CONFIG_FILE_ENV = "OPENAI_BINDING_CONFIG_FILE"


__all__ = [
    "DEFAULT_BASE_URL",
    "ASSISTANTS_BETA_HEADER",
    "HTTP_POOL_PURPOSE",
    "DEFAULT_RUN_POLL_INTERVAL_SECONDS",
    "CONFIG_FILE_ENV",
]
