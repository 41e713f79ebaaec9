#!/usr/bin/env python3

import click
import pytest

from json_schema_typegen.cli_utils import reconstruct_command_line
from json_schema_typegen.json_schema_typegen import json_schema_typegen


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(json_schema_typegen) == "json_schema_typegen"

    def test_reconstruct_command_line_with_context(self, tmp_path):
        """Arguments are shown by file name, non default options are kept"""
        schema = tmp_path / "person.json"
        schema.write_text("{}")
        params = {
            "name": "Person",
            "config": None,
            "namespace": "Acme",
            "force": True,
            "verbose": False,
            "path": str(schema),
            "output": "Person.cs",
        }
        with click.Context(json_schema_typegen) as ctx:
            ctx.params.update(params)
            result = reconstruct_command_line(json_schema_typegen)

        assert result == "json_schema_typegen person.json Person.cs --name Person --namespace Acme --force"


if __name__ == "__main__":
    pytest.main([__file__])
