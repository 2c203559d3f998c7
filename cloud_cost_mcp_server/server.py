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


"""Cloud Cost MCP Server implementation.

This server exposes a single read-only tool over a local JSON cost report,
returning per-vendor, per-month cost summaries as text.
"""

import logging
import sys
from typing import NoReturn

from mcp.server.fastmcp import FastMCP

from cloud_cost_mcp_server import __version__
from cloud_cost_mcp_server.config.settings import Settings, load_settings, parse_server_config
from cloud_cost_mcp_server.constants import (
    INTERNAL_ERROR_CODE,
    SERVER_NAME,
    TOOL_NAME,
)
from cloud_cost_mcp_server.exceptions import ConfigurationError
from cloud_cost_mcp_server.handlers.cost_handler import CostQueryHandler
from cloud_cost_mcp_server.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "create_server",
    "main",
]

# Define server instructions
SERVER_INSTRUCTIONS = f"""
# Cloud Cost MCP Server

Read-only cost summaries from a local cloud cost report.

## Tool
- **{TOOL_NAME}**: Cost entries grouped by vendor and month. Pass `vendors`
  (e.g. ['AWS', 'Azure']) and/or `months` in YYYY-MM format to narrow the
  result; omit both to list everything.

## Notes
- All amounts are in USD.
- Unknown vendors or months are skipped, not reported as errors.
"""


def create_server(settings: Settings) -> FastMCP:
    """Build the MCP server and register the cost tool."""
    mcp = FastMCP(
        name=SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        host=settings.FASTMCP_HOST,
        port=settings.FASTMCP_PORT,
    )
    # FastMCP reports the mcp library version unless told otherwise
    mcp._mcp_server.version = __version__

    handler = CostQueryHandler(settings.COST_DATA_PATH)
    handler.register(mcp)
    return mcp


def _exit_with_configuration_error(error: ConfigurationError) -> NoReturn:
    """Report a fatal startup error on stderr and exit with status 1.

    Logged at CRITICAL so no LOG_LEVEL setting can suppress it.
    """
    logger.critical(
        error.message, extra={"rpc_error_code": INTERNAL_ERROR_CODE, "data": error.data}
    )
    sys.exit(1)


def main():
    """Validate startup configuration and run the MCP server.

    Environment:
        CONFIG: JSON object with a non-empty 'license' key (required)
        COST_DATA_PATH: Cost report location, default data/cost.json
        LOG_LEVEL: Diagnostic log level, default INFO
        FASTMCP_TRANSPORT: 'stdio' (default), 'sse' or 'streamable-http'
        FASTMCP_HOST / FASTMCP_PORT: Bind address for HTTP transports
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging()
        _exit_with_configuration_error(e)

    configure_logging(settings.LOG_LEVEL)

    try:
        parse_server_config(settings.CONFIG)
    except ConfigurationError as e:
        _exit_with_configuration_error(e)

    mcp = create_server(settings)
    logger.info("Cloud Cost MCP Server running on %s", settings.FASTMCP_TRANSPORT)
    mcp.run(transport=settings.FASTMCP_TRANSPORT)


if __name__ == "__main__":
    main()
