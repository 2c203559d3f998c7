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


"""Tests for cost summary formatting."""

import pytest

from cloud_cost_mcp_server.constants import FAILED_TO_LOAD_MESSAGE, NO_DATA_FOUND_MESSAGE
from cloud_cost_mcp_server.models.cost_models import CostEntry, CostReport
from cloud_cost_mcp_server.utils.formatters import (
    format_cost_entry,
    format_cost_summary,
    format_cost_value,
    select_months,
)

AWS_APRIL_BLOCK = (
    "  Month: 2024-04\n"
    "    Date: 2024-04-01\n"
    "    Cost: $12.5 USD\n"
    "    Account ID: A1\n"
    "    Product Name: EC2\n"
    "    Region Name: us-east-1\n"
    "\n"
)


@pytest.fixture
def report(sample_cost_data):
    """Validated sample report."""
    return CostReport.model_validate(sample_cost_data)


def _vendor_headers(text):
    return [line for line in text.splitlines() if line.startswith("Vendor: ")]


def _month_lines(text):
    return [line.strip() for line in text.splitlines() if line.startswith("  Month: ")]


class TestFormatCostValue:
    """Tests for format_cost_value()"""

    def test_fractional_float(self):
        """Should keep the shortest decimal form"""
        assert format_cost_value(12.5) == "12.5"
        assert format_cost_value(0.1) == "0.1"

    def test_integral_float(self):
        """Should drop a zero fractional part"""
        assert format_cost_value(7.0) == "7"

    def test_integer(self):
        """Should render integers unchanged"""
        assert format_cost_value(20) == "20"
        assert format_cost_value(0) == "0"

    def test_small_magnitudes(self):
        """Should switch to exponent notation below 1e-6"""
        assert format_cost_value(0.000001) == "0.000001"
        assert format_cost_value(1e-07) == "1e-7"
        assert format_cost_value(1.23e-18) == "1.23e-18"

    def test_large_magnitudes(self):
        """Should switch to exponent notation from 1e21"""
        assert format_cost_value(1e20) == "100000000000000000000"
        assert format_cost_value(1e21) == "1e+21"
        assert format_cost_value(1.5e300) == "1.5e+300"
        assert format_cost_value(10**22) == "1e+22"

    def test_negative_values(self):
        """Should keep the sign in both notations"""
        assert format_cost_value(-12.5) == "-12.5"
        assert format_cost_value(-1e-07) == "-1e-7"
        assert format_cost_value(-0.0) == "0"

    def test_integer_beyond_double_precision(self):
        """Should round integers the way a double does"""
        assert format_cost_value(12345678901234567890) == "12345678901234567000"


class TestFormatCostEntry:
    """Tests for format_cost_entry()"""

    def test_entry_lines(self):
        """Should render five labelled lines and a blank line"""
        entry = CostEntry(
            date="2024-04-01",
            cost=12.5,
            accountId="A1",
            productName="EC2",
            regionName="us-east-1",
        )
        assert format_cost_entry(entry) == AWS_APRIL_BLOCK[len("  Month: 2024-04\n"):]


class TestSelectMonths:
    """Tests for select_months()"""

    def test_no_filter_returns_all(self):
        """Should return every month in stored order"""
        vendor_months = {"2024-05": [], "2024-04": []}
        assert select_months(vendor_months, None) == ["2024-05", "2024-04"]
        assert select_months(vendor_months, []) == ["2024-05", "2024-04"]

    def test_filter_keeps_vendor_order(self):
        """Should intersect with the filter in the vendor's order"""
        vendor_months = {"2024-03": [], "2024-04": [], "2024-05": []}
        assert select_months(vendor_months, ["2024-05", "2024-03", "2023-01"]) == [
            "2024-03",
            "2024-05",
        ]


class TestFormatCostSummary:
    """Tests for format_cost_summary()"""

    def test_exact_single_vendor_month(self, report):
        """Should render the exact text for one vendor and month"""
        result = format_cost_summary(report, ["AWS"], ["2024-04"])
        assert result == "Vendor: AWS\n" + AWS_APRIL_BLOCK + "\n"

    def test_example_labels_present(self, report):
        """Should contain every labelled value of the example entry"""
        result = format_cost_summary(report, ["AWS"], ["2024-04"])
        for expected in [
            "Vendor: AWS",
            "Month: 2024-04",
            "Date: 2024-04-01",
            "Cost: $12.5 USD",
            "Account ID: A1",
            "Product Name: EC2",
            "Region Name: us-east-1",
        ]:
            assert expected in result

    def test_no_filters_lists_everything_in_order(self, report):
        """Should enumerate every vendor and month in stored order"""
        result = format_cost_summary(report)
        assert _vendor_headers(result) == ["Vendor: AWS", "Vendor: Azure"]
        assert _month_lines(result) == [
            "Month: 2024-04",
            "Month: 2024-05",
            "Month: 2024-05",
            "Month: 2024-04",
        ]

    def test_empty_filter_lists_equal_no_filters(self, report):
        """Should treat empty filter lists as absent"""
        assert format_cost_summary(report, [], []) == format_cost_summary(report)

    def test_vendor_filter_uses_caller_order(self, report):
        """Should follow the caller's vendor order"""
        result = format_cost_summary(report, ["Azure", "AWS"])
        assert _vendor_headers(result) == ["Vendor: Azure", "Vendor: AWS"]

    def test_unknown_vendor_skipped(self, report):
        """Should skip vendors absent from the data without error"""
        result = format_cost_summary(report, ["GCP", "AWS"])
        assert _vendor_headers(result) == ["Vendor: AWS"]
        assert "GCP" not in result

    def test_only_unknown_vendor(self, report):
        """Should return the no-data fallback for an unknown vendor"""
        assert format_cost_summary(report, ["GCP"], ["2024-04"]) == NO_DATA_FOUND_MESSAGE

    def test_month_filter_per_vendor(self, report):
        """Should emit only months present for each vendor"""
        result = format_cost_summary(report, None, ["2024-05", "2025-01"])
        assert _month_lines(result) == ["Month: 2024-05", "Month: 2024-05"]

    def test_month_filter_without_match_keeps_header(self, report):
        """Should still emit the vendor header when no month matches"""
        result = format_cost_summary(report, ["AWS"], ["1999-01"])
        assert result == "Vendor: AWS\n\n"

    def test_empty_month(self, report):
        """Should emit the no-data line for a month without entries"""
        result = format_cost_summary(report, ["Azure"], ["2024-05"])
        assert result == "Vendor: Azure\n  Month: 2024-05\n    No cost data available\n\n"

    def test_non_array_month(self):
        """Should treat a non-array month value as empty"""
        report = CostReport.model_validate({"Data": {"GCP": {"2024-06": {"unexpected": 1}}}})
        result = format_cost_summary(report)
        assert "    No cost data available\n" in result

    def test_integral_float_cost(self, report):
        """Should render 7.0 as 7"""
        result = format_cost_summary(report, ["Azure"], ["2024-04"])
        assert "    Cost: $7 USD\n" in result

    def test_null_report(self):
        """Should return the failure message when loading failed"""
        assert format_cost_summary(None) == FAILED_TO_LOAD_MESSAGE
        assert format_cost_summary(None, ["AWS"], ["2024-04"]) == FAILED_TO_LOAD_MESSAGE

    def test_missing_data_field(self):
        """Should return the failure message when Data is absent"""
        report = CostReport.model_validate({"Other": {}})
        assert format_cost_summary(report) == FAILED_TO_LOAD_MESSAGE

    def test_empty_dataset(self):
        """Should return the no-data fallback for an empty dataset"""
        report = CostReport.model_validate({"Data": {}})
        assert format_cost_summary(report) == NO_DATA_FOUND_MESSAGE

    def test_null_vendor_skipped(self):
        """Should skip vendors whose value is null"""
        report = CostReport.model_validate({"Data": {"AWS": None}})
        assert format_cost_summary(report) == NO_DATA_FOUND_MESSAGE

    def test_vendor_absent_from_single_vendor_report(self):
        """Should return the no-data fallback for Azure against AWS-only data"""
        report = CostReport.model_validate(
            {
                "Data": {
                    "AWS": {
                        "2024-04": [
                            {
                                "date": "2024-04-01",
                                "cost": 12.5,
                                "accountId": "A1",
                                "productName": "EC2",
                                "regionName": "us-east-1",
                            }
                        ]
                    }
                }
            }
        )
        assert format_cost_summary(report, ["Azure"]) == NO_DATA_FOUND_MESSAGE
