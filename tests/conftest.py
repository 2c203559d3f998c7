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


"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def sample_cost_data():
    """Sample cost report with two vendors."""
    return {
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
                ],
                "2024-05": [
                    {
                        "date": "2024-05-01",
                        "cost": 20,
                        "accountId": "A1",
                        "productName": "S3",
                        "regionName": "us-west-2",
                    },
                    {
                        "date": "2024-05-02",
                        "cost": 1.25,
                        "accountId": "A2",
                        "productName": "Lambda",
                        "regionName": "eu-west-1",
                    },
                ],
            },
            "Azure": {
                "2024-05": [],
                "2024-04": [
                    {
                        "date": "2024-04-03",
                        "cost": 7.0,
                        "accountId": "sub-1",
                        "productName": "Virtual Machines",
                        "regionName": "eastus",
                    }
                ],
            },
        }
    }


@pytest.fixture
def cost_file(tmp_path, sample_cost_data):
    """Cost report written to a temporary file."""
    path = tmp_path / "cost.json"
    path.write_text(json.dumps(sample_cost_data), encoding="utf-8")
    return path
