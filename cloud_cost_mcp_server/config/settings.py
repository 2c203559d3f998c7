# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Settings for the Cloud Cost MCP Server.

Based on Pydantic Settings, with environment variable injection and
type validation.

Priority (highest first):
1. Environment variables
2. .env file at the project root
3. Defaults in code
"""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloud_cost_mcp_server.constants import COST_DATA_FILE_NAME, DATA_DIR_NAME
from cloud_cost_mcp_server.exceptions import ConfigurationError

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Process settings read at startup."""

    # ==================== Startup configuration ====================
    CONFIG: Optional[str] = Field(
        default=None, description="JSON object with at least a 'license' key"
    )

    # ==================== Data ====================
    COST_DATA_PATH: Path = Field(
        default=PROJECT_ROOT / DATA_DIR_NAME / COST_DATA_FILE_NAME,
        description="Path of the cost report JSON file",
    )

    # ==================== Logging ====================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Diagnostic log level"
    )

    # ==================== Transport ====================
    FASTMCP_TRANSPORT: Literal["stdio", "sse", "streamable-http"] = Field(
        default="stdio", description="MCP transport"
    )
    FASTMCP_HOST: str = Field(default="127.0.0.1", description="Bind address for HTTP transports")
    FASTMCP_PORT: int = Field(default=8000, ge=1, le=65535, description="Port for HTTP transports")

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class ServerConfig(BaseModel):
    """Validated startup configuration from the CONFIG environment variable."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    license: str = Field(min_length=1, description="License key")


def parse_server_config(raw_config: Optional[str]) -> ServerConfig:
    """Validate the startup configuration blob.

    Args:
        raw_config: Raw value of the CONFIG environment variable

    Returns:
        ServerConfig with a non-empty license key

    Raises:
        ConfigurationError: Configuration is absent, not a JSON object, or has no license
    """
    if not raw_config:
        raise ConfigurationError("No configuration provided")

    try:
        payload = json.loads(raw_config)
    except json.JSONDecodeError as e:
        raise ConfigurationError("Invalid configuration JSON", data=str(e)) from e

    if not isinstance(payload, dict):
        raise ConfigurationError(
            "Invalid configuration JSON", data="Configuration must be a JSON object"
        )

    if not payload.get("license"):
        raise ConfigurationError("No license key provided")

    try:
        return ServerConfig.model_validate(payload)
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration JSON", data=str(e)) from e


def load_settings() -> Settings:
    """Read process settings from the environment and .env file.

    Raises:
        ConfigurationError: A setting has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid server settings", data=str(e)) from e
