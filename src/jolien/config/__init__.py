# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""Configuration management for jolien.

Container defaults come from ``JOLIEN_`` environment variables; application
configuration components come from ``APP_`` environment variables.
"""

from jolien.config.errors import CONFIG_ENVIRONMENT_ERROR, CONFIG_ERROR, ConfigError
from jolien.config.environment import Environment
from jolien.config.settings import ContainerSettings, clear_settings_cache, get_settings

# Imported last: it pulls in the component model, which needs the settings above.
from jolien.config.component import ComponentSettings

__all__ = [
    "CONFIG_ENVIRONMENT_ERROR",
    "CONFIG_ERROR",
    "ComponentSettings",
    "ConfigError",
    "ContainerSettings",
    "Environment",
    "clear_settings_cache",
    "get_settings",
]
