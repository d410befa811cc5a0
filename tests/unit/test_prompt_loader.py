"""Tests for prompt template and JSON schema loading."""

import json
from pathlib import Path

import pytest

from multilang.capabilities.exceptions import CapabilityError
from multilang.capabilities.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    @pytest.mark.parametrize("name", ["extraction", "detection", "translation", "analysis"])
    def test_default_templates_take_schema(self, name: str) -> None:
        assert "{json_schema}" in load_prompt_template(name)

    def test_translation_template_placeholders(self) -> None:
        template = load_prompt_template("translation")
        assert "{text}" in template
        assert "{source_language}" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {text}")
        assert load_prompt_template("analysis", custom) == "Hello {text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(CapabilityError, match="Failed to load prompt"):
            load_prompt_template("analysis", Path("/nonexistent/file.txt"))

    def test_unknown_name_raises_error(self) -> None:
        with pytest.raises(CapabilityError):
            load_prompt_template("poetry")


class TestLoadJsonSchema:
    @pytest.mark.parametrize("name", ["extraction", "detection", "translation", "analysis"])
    def test_default_schemas_are_strict_objects(self, name: str) -> None:
        schema = json.loads(load_json_schema(name))
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == set(schema["properties"])

    def test_loads_custom_schema(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text('{"type": "object"}')
        assert load_json_schema("analysis", custom) == '{"type": "object"}'

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(CapabilityError, match="Failed to load JSON schema"):
            load_json_schema("analysis", Path("/nonexistent/schema.json"))
