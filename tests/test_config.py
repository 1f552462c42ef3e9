import pytest

from postman_openapi.config import ConvertOptions, build_options, load_config
from postman_openapi.exceptions import ConfigError


class TestConvertOptions:
    def test_defaults(self):
        options = ConvertOptions()
        assert options.default_tag == "default"
        assert options.strict is False
        assert options.openapi_version == "3.0.3"
        assert options.include_servers is True


class TestBuildOptions:
    def test_yaml_file(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("strict: true\ndefault_tag: misc\n")
        options = build_options(f)
        assert options.strict is True
        assert options.default_tag == "misc"

    def test_json_file(self, tmp_path):
        f = tmp_path / "options.json"
        f.write_text('{"title": "From JSON"}')
        assert build_options(f).title == "From JSON"

    def test_overrides_win_and_none_is_ignored(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("default_tag: misc\ntitle: File title\n")
        options = build_options(f, default_tag="other", title=None)
        assert options.default_tag == "other"
        assert options.title == "File title"

    def test_unknown_option(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("colour: blue\n")
        with pytest.raises(ConfigError):
            build_options(f)

    def test_empty_file(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("")
        assert load_config(f) == {}

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("strict: [true\n")
        with pytest.raises(ConfigError):
            load_config(f)
