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


"""Cost query handler for the Cloud Cost MCP Server.

This module provides the get-cost tool. The handler is constructed once at
startup with the report location and registered on the server; each call
reloads the report, so edits to the file are visible immediately.

Key design principle:
- Flat parameter signatures with Annotated types
- Failures surface as fixed response text, never as protocol errors
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from cloud_cost_mcp_server.constants import (
    MONTHS_PARAM_DESCRIPTION,
    TOOL_DESCRIPTION,
    TOOL_NAME,
    VENDORS_PARAM_DESCRIPTION,
)
from cloud_cost_mcp_server.exceptions import SchemaError
from cloud_cost_mcp_server.models.cost_models import CostReport
from cloud_cost_mcp_server.utils.data_loader import load_cost_data, parse_cost_report
from cloud_cost_mcp_server.utils.formatters import format_cost_summary

logger = logging.getLogger(__name__)


class CostQueryHandler:
    """Serves cost summaries from a local cost report file."""

    def __init__(self, data_path: Path):
        self.data_path = Path(data_path)

    def register(self, mcp: FastMCP) -> None:
        """Register the get-cost tool on the given server."""
        mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)(self.get_cost)
        logger.info("Registered tool %s", TOOL_NAME)

    async def load_report(self) -> Optional[CostReport]:
        """Load and validate the cost report, or None if it is unavailable."""
        raw = await load_cost_data(self.data_path)
        if raw is None:
            return None

        try:
            return parse_cost_report(raw)
        except SchemaError as e:
            logger.error(
                "Cost data does not match the expected schema",
                extra={"data": {"error": str(e), "filePath": str(self.data_path)}},
            )
            return None

    async def get_cost(
        self,
        vendors: Annotated[
            Optional[list[str]],
            Field(description=VENDORS_PARAM_DESCRIPTION),
        ] = None,
        months: Annotated[
            Optional[list[str]],
            Field(description=MONTHS_PARAM_DESCRIPTION),
        ] = None,
    ) -> str:
        """Get a cloud cost summary for the requested vendors and months.

        Args:
            vendors: Vendor names to include; all vendors when omitted
            months: Months in YYYY-MM format to include; all months when omitted

        Returns:
            Text summary of matching cost entries
        """
        logger.info(
            "Starting get_cost",
            extra={"data": {"vendors": vendors, "months": months}},
        )
        report = await self.load_report()
        return format_cost_summary(report, vendors, months)
