"""Tests for manifest discovery and parsing."""

from __future__ import annotations

import json

import pytest
from structlog.testing import capture_logs

from depaudit.exceptions import ManifestParseError, UnsupportedManifestError
from depaudit.manifests import (
    PARSER_REGISTRY,
    find_manifests,
    load_manifest,
    parse_manifest,
    parser_for,
)
from depaudit.manifests.parsers.pip_requirements import PipRequirementsParser
from depaudit.manifests.parsers.shallow import (
    GenericManifestParser,
    ShallowTomlParser,
    ShallowYamlParser,
)
from depaudit.models import ManifestInfo

# ── registry / discovery ──


class TestRegistry:
    def test_all_parsers_registered(self):
        assert {"npm", "composer", "pip-requirements", "toml", "yaml", "generic"} <= set(
            PARSER_REGISTRY
        )

    @pytest.mark.parametrize(
        "name,manifest_type",
        [
            ("package.json", "npm"),
            ("composer.json", "composer"),
            ("requirements.txt", "pip-requirements"),
            ("Pipfile", "toml"),
            ("pyproject.toml", "toml"),
            ("Cargo.toml", "toml"),
            ("pubspec.yaml", "yaml"),
            ("Gemfile", "generic"),
            ("go.mod", "generic"),
            ("pom.xml", "generic"),
            ("build.gradle", "generic"),
            ("App.csproj", "generic"),
        ],
    )
    def test_parser_for(self, tmp_path, name, manifest_type):
        assert parser_for(tmp_path / name).manifest_type == manifest_type

    def test_parser_for_unknown(self, tmp_path):
        assert parser_for(tmp_path / "setup.cfg") is None


class TestFindManifests:
    def test_empty_workspace(self, tmp_path):
        assert find_manifests(tmp_path) == []

    def test_priority_order(self, make_workspace):
        root = make_workspace(
            {
                "requirements.txt": "flask\n",
                "Cargo.toml": "",
                "package.json": "{}",
                "composer.json": "{}",
            }
        )
        names = [p.name for p in find_manifests(root)]
        assert names == ["package.json", "composer.json", "requirements.txt", "Cargo.toml"]

    def test_root_manifest_before_nested(self, make_workspace):
        root = make_workspace({"a/package.json": "{}", "package.json": "{}"})
        found = find_manifests(root)
        assert found[0] == root / "package.json"
        assert found[1] == root / "a" / "package.json"

    def test_ignored_directories(self, make_workspace):
        root = make_workspace(
            {"node_modules/dep/package.json": "{}", "vendor/x/composer.json": "{}"}
        )
        assert find_manifests(root) == []

    def test_csproj_glob(self, make_workspace):
        root = make_workspace({"src/App.csproj": "<Project />"})
        assert [p.name for p in find_manifests(root)] == ["App.csproj"]


# ── JSON manifests ──


class TestJsonManifests:
    def test_package_json(self, tmp_path):
        f = tmp_path / "package.json"
        f.write_text(
            json.dumps(
                {
                    "name": "app",
                    "dependencies": {"lodash": "^4.0.0"},
                    "devDependencies": {"jest": "^29.0.0"},
                }
            )
        )
        info = load_manifest(f)
        assert info.dependencies == {"lodash": "^4.0.0"}
        assert info.dev_dependencies == {"jest": "^29.0.0"}

    def test_package_json_without_sections(self, tmp_path):
        f = tmp_path / "package.json"
        f.write_text('{"name": "bare"}')
        assert load_manifest(f) == ManifestInfo()

    def test_composer_json(self, tmp_path):
        f = tmp_path / "composer.json"
        f.write_text(
            json.dumps(
                {
                    "require": {"php": ">=8.1", "monolog/monolog": "^3.0"},
                    "require-dev": {"phpunit/phpunit": "^10"},
                }
            )
        )
        info = load_manifest(f)
        assert info.dependencies == {"php": ">=8.1", "monolog/monolog": "^3.0"}
        assert info.dev_dependencies == {"phpunit/phpunit": "^10"}

    def test_malformed_json_strict(self, tmp_path):
        f = tmp_path / "package.json"
        f.write_text("{not json")
        with pytest.raises(ManifestParseError) as exc_info:
            load_manifest(f)
        assert exc_info.value.path == str(f)

    def test_non_object_section_strict(self, tmp_path):
        f = tmp_path / "package.json"
        f.write_text('{"dependencies": ["lodash"]}')
        with pytest.raises(ManifestParseError):
            load_manifest(f)

    def test_malformed_json_fail_open(self, tmp_path):
        f = tmp_path / "package.json"
        f.write_text("[1, 2")
        with capture_logs() as logs:
            info = parse_manifest(f)
        assert info == ManifestInfo()
        assert logs[0]["event"] == "manifest.parse_failed"
        assert logs[0]["log_level"] == "warning"


class TestStrictErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestParseError):
            load_manifest(tmp_path / "package.json")

    def test_unsupported(self, tmp_path):
        f = tmp_path / "setup.cfg"
        f.write_text("[metadata]\n")
        with pytest.raises(UnsupportedManifestError):
            load_manifest(f)

    def test_missing_file_fail_open(self, tmp_path):
        assert parse_manifest(tmp_path / "composer.json") == ManifestInfo()


# ── requirements.txt ──


class TestPipRequirementsParser:
    @pytest.fixture
    def parser(self):
        return PipRequirementsParser()

    def test_pinned_with_comment_and_blank(self, parser, tmp_path):
        f = tmp_path / "requirements.txt"
        content = "flask==2.0.1\n# a comment\n\n"
        info = parser.parse(f, content)
        assert info.dependencies == {"flask": "2.0.1"}
        assert info.dev_dependencies == {}

    @pytest.mark.parametrize(
        "line,name,version",
        [
            ("django>=4.2", "django", "4.2"),
            ("numpy<=1.26.0", "numpy", "1.26.0"),
            ("attrs~=23.1", "attrs", "23.1"),
            ("black", "black", "*"),
            ("uvicorn[standard]==0.23.2", "uvicorn", "0.23.2"),
            ("zope.interface==6.0", "zope.interface", "6.0"),
            ("foo!=1.0", "foo", "*"),
            ("requests==2.31.0  # pinned for py3.8", "requests", "2.31.0"),
        ],
    )
    def test_lines(self, parser, tmp_path, line, name, version):
        info = parser.parse(tmp_path / "requirements.txt", line + "\n")
        assert info.dependencies == {name: version}

    def test_skips_option_lines(self, parser, tmp_path):
        content = "-r base.txt\n--index-url https://pypi.org/simple\n-e ./local\nflask\n"
        info = parser.parse(tmp_path / "requirements.txt", content)
        assert info.dependencies == {"flask": "*"}

    def test_skips_unmatched(self, parser, tmp_path):
        info = parser.parse(tmp_path / "requirements.txt", "!!!\nrequests\n")
        assert info.dependencies == {"requests": "*"}


# ── shallow TOML / YAML / generic ──


class TestShallowParsers:
    def test_toml_pairs(self, tmp_path):
        content = '[dependencies]\nserde = "1.0"\ntokio = { version = "1" }\n'
        info = ShallowTomlParser().parse(tmp_path / "Cargo.toml", content)
        assert info.dependencies == {"serde": "1.0"}

    def test_toml_is_section_blind(self, tmp_path):
        content = '[package]\nname = "demo"\n\n[dev-dependencies]\nrstest = "0.18"\n'
        info = ShallowTomlParser().parse(tmp_path / "Cargo.toml", content)
        assert info.dependencies == {"name": "demo", "rstest": "0.18"}
        assert info.dev_dependencies == {}

    def test_pipfile(self, tmp_path):
        content = '[packages]\nrequests = "*"\n\n[dev-packages]\npytest = ">=7"\n'
        info = ShallowTomlParser().parse(tmp_path / "Pipfile", content)
        assert info.dependencies == {"requests": "*", "pytest": ">=7"}

    def test_indented_toml_ignored(self, tmp_path):
        info = ShallowTomlParser().parse(tmp_path / "pyproject.toml", '  x = "1"\n')
        assert info.dependencies == {}

    def test_yaml_top_level_quoted_only(self, tmp_path):
        content = 'name: "app"\nversion: 1.0.0\ndependencies:\n  http: "^1.1.0"\n'
        info = ShallowYamlParser().parse(tmp_path / "pubspec.yaml", content)
        assert info.dependencies == {"name": "app"}

    def test_generic_gemfile_yields_nothing(self, tmp_path):
        content = "source 'https://rubygems.org'\ngem 'rails', '~> 7.0'\n"
        info = GenericManifestParser().parse(tmp_path / "Gemfile", content)
        assert info == ManifestInfo()

    def test_generic_go_mod_yields_nothing(self, tmp_path):
        content = "module example.com/m\n\ngo 1.21\n\nrequire github.com/pkg/errors v0.9.1\n"
        info = GenericManifestParser().parse(tmp_path / "go.mod", content)
        assert info.dependencies == {}

    def test_generic_matching_pair(self, tmp_path):
        content = "version = '1.2.0'\n"
        info = GenericManifestParser().parse(tmp_path / "build.gradle", content)
        assert info.dependencies == {"version": "1.2.0"}
