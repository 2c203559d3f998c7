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


"""Text formatting utilities for the Cloud Cost MCP Server.

The get-cost tool returns a plain text summary. The layout is fixed: one
``Label: value`` pair per line, indented by nesting level.
"""

import math
from decimal import Decimal
from typing import Optional, Union

from cloud_cost_mcp_server.constants import (
    CURRENCY_CODE,
    FAILED_TO_LOAD_MESSAGE,
    NO_DATA_FOUND_MESSAGE,
    NO_MONTH_DATA_MESSAGE,
)
from cloud_cost_mcp_server.models.cost_models import CostEntry, CostReport, VendorMonths

VENDOR_INDENT = ""
MONTH_INDENT = "  "
ENTRY_INDENT = "    "


def format_cost_value(cost: Union[int, float]) -> str:
    """Render a cost the way a JSON number prints.

    Costs are treated as double precision numbers, as JSON readers do, and
    printed with the shortest digits that round-trip:

    - ``12.0`` -> ``12``, ``12.5`` -> ``12.5``
    - plain notation for decimal exponents from -6 to 20 (``0.000001``,
      ``100000000000000000000``)
    - exponent notation outside that range (``1e-7``, ``1e+21``, ``1.5e+300``)
    """
    try:
        value = float(cost)
    except OverflowError:
        value = math.inf if cost > 0 else -math.inf

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_cost_value(-value)

    # repr gives the shortest round-trip digits; normalize to digits * 10**exponent
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the first digit

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{sign}{abs(e)}"


def format_cost_entry(entry: CostEntry) -> str:
    """Format one cost entry, followed by a blank line."""
    return (
        f"{ENTRY_INDENT}Date: {entry.date}\n"
        f"{ENTRY_INDENT}Cost: ${format_cost_value(entry.cost)} {CURRENCY_CODE}\n"
        f"{ENTRY_INDENT}Account ID: {entry.account_id}\n"
        f"{ENTRY_INDENT}Product Name: {entry.product_name}\n"
        f"{ENTRY_INDENT}Region Name: {entry.region_name}\n"
        "\n"
    )


def select_months(vendor_months: VendorMonths, months: Optional[list[str]]) -> list[str]:
    """Months to render for a vendor, in the vendor's own order."""
    if months:
        return [month for month in vendor_months if month in months]
    return list(vendor_months)


def format_vendor_costs(
    vendor: str, vendor_months: VendorMonths, months: Optional[list[str]]
) -> str:
    """Format the header, months and entries of one vendor."""
    parts = [f"{VENDOR_INDENT}Vendor: {vendor}\n"]
    for month in select_months(vendor_months, months):
        parts.append(f"{MONTH_INDENT}Month: {month}\n")
        entries = vendor_months[month]
        if entries:
            parts.extend(format_cost_entry(entry) for entry in entries)
        else:
            parts.append(f"{ENTRY_INDENT}{NO_MONTH_DATA_MESSAGE}\n")
    parts.append("\n")
    return "".join(parts)


def format_cost_summary(
    report: Optional[CostReport],
    vendors: Optional[list[str]] = None,
    months: Optional[list[str]] = None,
) -> str:
    """Build the get-cost text summary.

    Args:
        report: Loaded cost report, or None when loading failed
        vendors: Vendor names to include; all vendors when empty or None
        months: Month keys (YYYY-MM) to include; all months when empty or None

    Returns:
        The summary text, or one of the fixed fallback messages
    """
    if report is None or report.data is None:
        return FAILED_TO_LOAD_MESSAGE

    dataset = report.data
    selected_vendors = vendors if vendors else list(dataset)

    parts = []
    for vendor in selected_vendors:
        vendor_months = dataset.get(vendor)
        if vendor_months is None:
            continue
        parts.append(format_vendor_costs(vendor, vendor_months, months))

    response_text = "".join(parts)
    if not response_text.strip():
        return NO_DATA_FOUND_MESSAGE
    return response_text
