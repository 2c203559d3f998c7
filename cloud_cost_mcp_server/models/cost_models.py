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


"""Cost report data models.

The cost report file nests entries by vendor and month:

    {"Data": {"<vendor>": {"<YYYY-MM>": [<entry>, ...]}}}

Mappings keep the file's key order, which is the order entries are rendered in.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt

from cloud_cost_mcp_server.constants import COST_DATA_FIELD


class CostEntry(BaseModel):
    """A single cost line item for one vendor and month."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    date: str = Field(description="Billing date of the entry")
    cost: Union[StrictInt, StrictFloat] = Field(description="Cost amount in USD")
    account_id: str = Field(alias="accountId", description="Cloud account identifier")
    product_name: str = Field(alias="productName", description="Billed product or service")
    region_name: str = Field(alias="regionName", description="Region the cost was incurred in")


def _entries_or_empty(value: Any) -> Any:
    """Treat a month value that is not an array as having no entries."""
    if isinstance(value, list):
        return value
    return []


MonthEntries = Annotated[list[CostEntry], BeforeValidator(_entries_or_empty)]

# month key (YYYY-MM) -> entries, in file order
VendorMonths = dict[str, MonthEntries]

# vendor name -> months; a null vendor value is kept and skipped on render
CostDataset = dict[str, Optional[VendorMonths]]


class CostReport(BaseModel):
    """Top-level cost report document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    data: Optional[CostDataset] = Field(
        default=None, alias=COST_DATA_FIELD, description="Cost data keyed by vendor, then month"
    )
