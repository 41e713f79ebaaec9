"""
Functional tests driven by the JSON files in test_data/functional.

Each test case holds a schema (inline or as a file under test_data),
optional generator settings and the snippets the generated C# must and
must not contain.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_typegen import CSharpCodeGenerator, CSharpGeneratorSettings

TEST_DATA_DIR = Path(__file__).parent / "test_data"


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    test_cases = []

    for json_file in sorted((TEST_DATA_DIR / "functional").glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _load_schema(test_case):
    """Load schema from test case (either inline or from file)."""
    if "schema" in test_case:
        return test_case["schema"]
    elif "schema_file" in test_case:
        with open(TEST_DATA_DIR / test_case["schema_file"]) as f:
            return json.load(f)
    else:
        raise ValueError("Test case must have either 'schema' or 'schema_file'")


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda test_case: test_case["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    settings = CSharpGeneratorSettings.from_dict(test_case.get("config", {}))
    generator = CSharpCodeGenerator(_load_schema(test_case), settings)
    generated_code = generator.generate_file(test_case.get("class_name", "TestClass"))

    for expected in test_case.get("expected_contains", []):
        assert expected in generated_code, f"Expected pattern '{expected}' not found in output of {test_case['name']} ({test_case['_source_file']}):\n{generated_code}"

    for unexpected in test_case.get("expected_not_contains", []):
        assert unexpected not in generated_code, f"Unexpected pattern '{unexpected}' found in output of {test_case['name']} ({test_case['_source_file']}):\n{generated_code}"
