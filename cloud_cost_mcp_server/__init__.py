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


"""Cloud Cost MCP Server.

This module provides an MCP tool for querying a local cloud cost report,
filtered by vendor and month.

This is a standalone, read-only server designed for tool-calling agents
over the stdio transport.
"""

__version__ = "1.0.0"
__author__ = "Cloud Cost Team"
__description__ = "Cloud Cost MCP Server for multi-vendor monthly cost summaries"
