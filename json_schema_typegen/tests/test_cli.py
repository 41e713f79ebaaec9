import json
from pathlib import Path

from click.testing import CliRunner

from json_schema_typegen.json_schema_typegen import json_schema_typegen

SCHEMAS_DIR = Path(__file__).parent / "test_data" / "schemas"


class TestCli:
    """Test cases for the json_schema_typegen command"""

    def test_generate(self, tmp_path):
        output = tmp_path / "Person.cs"
        result = CliRunner().invoke(
            json_schema_typegen,
            [str(SCHEMAS_DIR / "person.schema.json"), str(output), "--name", "Person", "--namespace", "Acme.Models"],
        )

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert "namespace Acme.Models" in code
        assert "public partial class Person" in code
        assert "// Generated by json_schema_typegen v" in code
        assert "json_schema_typegen person.schema.json " in code
        assert "Person.cs --name Person --namespace Acme.Models" in code

    def test_existing_output_requires_force(self, tmp_path):
        output = tmp_path / "Person.cs"
        output.write_text("// keep")
        args = [str(SCHEMAS_DIR / "person.schema.json"), str(output)]

        result = CliRunner().invoke(json_schema_typegen, args)
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text() == "// keep"

        result = CliRunner().invoke(json_schema_typegen, [*args, "--force"])
        assert result.exit_code == 0, result.output
        assert "public partial class PersonRecord" in output.read_text()

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"namespace": "FromConfig", "array_type": "System.Collections.Generic.List", "output": {"mode": "force"}}))
        output = tmp_path / "Person.cs"
        output.write_text("// replaced")

        result = CliRunner().invoke(json_schema_typegen, [str(SCHEMAS_DIR / "person.schema.json"), str(output), "-c", str(config)])

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert "namespace FromConfig" in code
        assert "System.Collections.Generic.List<Role> Roles" in code

    def test_namespace_option_overrides_config(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"namespace": "FromConfig"}))
        output = tmp_path / "Person.cs"

        result = CliRunner().invoke(
            json_schema_typegen,
            [str(SCHEMAS_DIR / "person.schema.json"), str(output), "-c", str(config), "--namespace", "FromFlag"],
        )

        assert result.exit_code == 0, result.output
        assert "namespace FromFlag" in output.read_text()

    def test_bad_reference_is_reported(self, tmp_path):
        schema = tmp_path / "bad.json"
        schema.write_text(json.dumps({"properties": {"a": {"$ref": "#/definitions/Missing"}}}))

        result = CliRunner().invoke(json_schema_typegen, [str(schema), str(tmp_path / "Bad.cs")])

        assert result.exit_code == 1
        assert "Could not resolve '#/definitions/Missing'" in result.output
        assert not (tmp_path / "Bad.cs").exists()

    def test_missing_template_package_is_reported(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"template_package": "Missing"}))

        result = CliRunner().invoke(json_schema_typegen, [str(SCHEMAS_DIR / "person.schema.json"), str(tmp_path / "P.cs"), "-c", str(config)])

        assert result.exit_code == 1
        assert "Could not load template 'Class' for package 'Missing'." in result.output

    def test_invalid_config_value_is_reported(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"null_handling": "bogus"}))

        result = CliRunner().invoke(json_schema_typegen, [str(SCHEMAS_DIR / "person.schema.json"), str(tmp_path / "P.cs"), "-c", str(config)])

        assert result.exit_code == 1
        assert "'bogus' is not a valid NullHandling" in result.output
        assert "Traceback" not in result.output
        assert not (tmp_path / "P.cs").exists()

    def test_malformed_config_file_is_reported(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text("{not json")

        result = CliRunner().invoke(json_schema_typegen, [str(SCHEMAS_DIR / "person.schema.json"), str(tmp_path / "P.cs"), "-c", str(config)])

        assert result.exit_code == 1
        assert "Error:" in result.output
