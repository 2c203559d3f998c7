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


"""Exception definitions for the Cloud Cost MCP Server."""

from typing import Any, Optional


class CloudCostError(Exception):
    """Base exception for the cloud cost server"""

    pass


class SchemaError(CloudCostError):
    """Cost report does not match the expected structure"""

    pass


class ConfigurationError(CloudCostError):
    """Startup configuration is missing or invalid.

    The message is reported as the JSON-RPC error message; ``data`` carries
    optional detail such as the JSON parser error.
    """

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data
