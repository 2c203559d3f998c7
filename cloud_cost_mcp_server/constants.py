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


"""Constants for the Cloud Cost MCP Server.

This module contains the server identity, tool metadata and the fixed
response texts of the get-cost tool.
"""

# Server identity
SERVER_NAME: str = "cloud-cost"

# Tool metadata
TOOL_NAME: str = "get-cost"
TOOL_DESCRIPTION: str = "Get cloud cost summary for multiple vendors and months"
VENDORS_PARAM_DESCRIPTION: str = "List of cloud vendor names (e.g. ['AWS', 'Azure'])"
MONTHS_PARAM_DESCRIPTION: str = "List of months in YYYY-MM format (e.g. ['2024-04', '2024-05'])"

# Data file location, relative to the project root
DATA_DIR_NAME: str = "data"
COST_DATA_FILE_NAME: str = "cost.json"

# Top-level field of the cost report holding vendor data
COST_DATA_FIELD: str = "Data"

# Fixed response texts
FAILED_TO_LOAD_MESSAGE: str = "Failed to load cost data"
NO_DATA_FOUND_MESSAGE: str = "No cost data found for the given parameters."
NO_MONTH_DATA_MESSAGE: str = "No cost data available"
CURRENCY_CODE: str = "USD"

# JSON-RPC diagnostics
JSONRPC_VERSION: str = "2.0"
INTERNAL_ERROR_CODE: int = -32603
