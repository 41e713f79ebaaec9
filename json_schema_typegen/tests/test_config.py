import pytest

from json_schema_typegen.config import CSharpGeneratorSettings, NullHandling, OutputMode


class TestCSharpGeneratorSettings:
    """Test cases for loading settings"""

    def test_defaults(self):
        settings = CSharpGeneratorSettings()
        assert settings.namespace == "MyNamespace"
        assert settings.null_handling == NullHandling.JSON_SCHEMA
        assert settings.output.mode == OutputMode.ERROR_IF_EXISTS

    def test_from_dict(self):
        settings = CSharpGeneratorSettings.from_dict(
            {
                "namespace": "Acme",
                "null_handling": "swagger",
                "array_type": "System.Collections.Generic.List",
                "output": {"mode": "force", "validate_before_write": False},
                "unknown_key": 1,
            }
        )
        assert settings.namespace == "Acme"
        assert settings.null_handling == NullHandling.SWAGGER
        assert settings.array_type == "System.Collections.Generic.List"
        assert settings.output.mode == OutputMode.FORCE
        assert not settings.output.validate_before_write
        assert not hasattr(settings, "unknown_key")

    def test_to_dict_round_trip(self):
        settings = CSharpGeneratorSettings(namespace="Acme", additional_usings=["System.Linq"])
        data = settings.to_dict()
        assert data["null_handling"] == "json_schema"
        assert data["output"] == {"mode": "error", "validate_before_write": True}
        assert CSharpGeneratorSettings.from_dict(data) == settings

    def test_from_dict_rejects_unknown_enum_values(self):
        with pytest.raises(ValueError):
            CSharpGeneratorSettings.from_dict({"null_handling": "bogus"})
        with pytest.raises(ValueError):
            CSharpGeneratorSettings.from_dict({"output": {"mode": "merge"}})
