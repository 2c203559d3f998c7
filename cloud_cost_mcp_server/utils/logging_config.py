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


"""Diagnostic logging for the Cloud Cost MCP Server.

stdout carries the MCP stdio transport, so all diagnostics go to stderr as
one JSON-RPC shaped object per line:

    {"jsonrpc": "2.0", "method": "log", "params": {"level": ..., "message": ..., "data": ...}}

Records logged with ``extra={"rpc_error_code": <code>}`` are rendered as
JSON-RPC error objects instead.
"""

import json
import logging
import sys

from cloud_cost_mcp_server.constants import JSONRPC_VERSION


class JsonRpcLogFormatter(logging.Formatter):
    """Format log records as JSON-RPC log notifications or error objects."""

    def format(self, record: logging.LogRecord) -> str:
        data = getattr(record, "data", None)
        error_code = getattr(record, "rpc_error_code", None)

        if error_code is not None:
            error = {"code": error_code, "message": record.getMessage()}
            if data is not None:
                error["data"] = data
            payload = {"jsonrpc": JSONRPC_VERSION, "error": error}
        else:
            params = {"level": record.levelname.lower(), "message": record.getMessage()}
            if data is not None:
                params["data"] = data
            if record.exc_info:
                params["exception"] = self.formatException(record.exc_info)
            payload = {"jsonrpc": JSONRPC_VERSION, "method": "log", "params": params}

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(level: str = "INFO") -> None:
    """Route all logging to stderr through the JSON-RPC formatter."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonRpcLogFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
