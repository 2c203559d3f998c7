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


"""Cost report loading.

The report is re-read from disk on every tool call; nothing is cached.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from cloud_cost_mcp_server.exceptions import SchemaError
from cloud_cost_mcp_server.models.cost_models import CostReport

logger = logging.getLogger(__name__)


async def load_cost_data(file_path: Path) -> Optional[Any]:
    """Read and parse the cost report JSON file.

    Args:
        file_path: Path of the cost report

    Returns:
        The parsed JSON value, or None if the file is missing, unreadable, malformed
        or nested too deeply to decode
    """
    logger.info(
        "Checking cost data file",
        extra={
            "data": {
                "filePath": str(file_path),
                "fileExists": file_path.exists(),
                "currentDirectory": os.getcwd(),
            }
        },
    )

    try:
        content = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        return json.loads(content)
    except (OSError, ValueError, RecursionError) as e:
        logger.error(
            "Error reading cost data from file",
            extra={
                "data": {
                    "error": str(e),
                    "filePath": str(file_path),
                    "cwd": os.getcwd(),
                }
            },
        )
        return None


def parse_cost_report(raw: Any) -> CostReport:
    """Validate parsed JSON into a CostReport.

    Raises:
        SchemaError: The document is not an object, or vendor data is mistyped
    """
    if not isinstance(raw, dict):
        raise SchemaError(f"Cost report must be a JSON object, got {type(raw).__name__}")

    try:
        return CostReport.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(str(e)) from e
