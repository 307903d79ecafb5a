"""
Tests for the generate use case — name splitting, gating, and end-to-end plans.
"""

from pathlib import PurePosixPath

import pytest

from strap.adapters.memory import MemoryFilesystem
from strap.core.errors import (
    ComponentExistsError,
    InvalidNameError,
    ProjectRootError,
    TemplateIOError,
)
from strap.core.models.component import ComponentKind
from strap.core.models.config import ResolvedConfig
from strap.core.models.template import PLACEHOLDER
from strap.core.use_cases.generate import (
    build_request,
    check_project_root,
    generate_component,
    split_name,
)

TEMPLATES = "src/components/.templates"


class TestSplitName:
    def test_plain_name(self):
        assert split_name("Button") == ("", "Button")

    def test_nested_name_with_extension(self):
        assert split_name("foo/bar/Baz.tsx") == ("foo/bar", "Baz")

    def test_multiple_dots(self):
        assert split_name("Baz.test.js") == ("", "Baz")

    def test_backslash_separator(self):
        assert split_name("foo\\Baz") == ("foo", "Baz")

    def test_empty_segments_dropped(self):
        assert split_name("foo//bar/Baz") == ("foo/bar", "Baz")

    @pytest.mark.parametrize("raw", ["", "foo/", ".js", "foo/.hidden"])
    def test_no_leaf_raises(self, raw):
        with pytest.raises(InvalidNameError):
            split_name(raw)


class TestBuildRequest:
    def test_takes_kind_extension_and_force_from_config(self):
        config = ResolvedConfig(
            component_kind=ComponentKind.CLASS, typescript=True, force=True
        )
        req = build_request("ui/Card.jsx", config)
        assert req.raw_name == "ui/Card.jsx"
        assert req.name == "Card"
        assert req.directory == "ui"
        assert req.kind == ComponentKind.CLASS
        assert req.extension == ".ts"
        assert req.force is True


class TestCheckProjectRoot:
    def test_marker_present(self, project_fs: MemoryFilesystem):
        check_project_root(project_fs)

    def test_marker_missing(self):
        with pytest.raises(ProjectRootError, match="root directory"):
            check_project_root(MemoryFilesystem())


class TestGenerateComponent:
    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_defaults_produce_two_files(self, project_fs: MemoryFilesystem, kind):
        config = ResolvedConfig(component_kind=kind)
        result = generate_component(project_fs, "Button", config)

        assert result.written == [
            "src/components/Button/index.js",
            "src/components/Button/Button.js",
        ]
        generated = {
            path: content
            for path, content in project_fs.files.items()
            if path.startswith("src/components/Button/")
        }
        assert len(generated) == 2
        for content in generated.values():
            assert PLACEHOLDER not in content
        body = generated["src/components/Button/Button.js"]
        if kind == ComponentKind.CLASS:
            assert "class Button extends Component" in body
        else:
            assert "const Button = () =>" in body

    def test_typescript_extension(self, project_fs: MemoryFilesystem):
        config = ResolvedConfig(typescript=True)
        result = generate_component(project_fs, "Button", config)
        assert result.written == [
            "src/components/Button/index.ts",
            "src/components/Button/Button.ts",
        ]

    def test_nested_name(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        result = generate_component(project_fs, "foo/bar/Baz.tsx", config)
        assert result.request.name == "Baz"
        assert result.request.directory == "foo/bar"
        assert result.output_dir == PurePosixPath("src/components/foo/bar")
        assert "src/components/foo/bar/Baz/Baz.js" in project_fs.files
        assert result.display_path == "src/components/foo/bar"

    def test_empty_base_path(self, project_fs: MemoryFilesystem):
        config = ResolvedConfig(base_path="", template_path=".templates")
        result = generate_component(project_fs, "Button", config)
        assert "Button/Button.js" in project_fs.files
        assert result.display_path == "."

    def test_trailing_slash_base_path(self, project_fs: MemoryFilesystem):
        config = ResolvedConfig(base_path="src/components/", template_path="src/components/.templates")
        result = generate_component(project_fs, "foo/Bar", config)
        assert result.display_path == "src/components/foo"
        assert "src/components/foo/Bar/Bar.js" in project_fs.files

    def test_not_in_project_root(self, config: ResolvedConfig):
        fs = MemoryFilesystem()
        with pytest.raises(ProjectRootError):
            generate_component(fs, "Button", config)
        assert fs.call_log == []

    def test_existing_component_blocked(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        generate_component(project_fs, "Button", config)
        writes_before = list(project_fs.call_log)

        with pytest.raises(ComponentExistsError, match='"Button" already exists'):
            generate_component(project_fs, "Button", config)
        assert project_fs.call_log == writes_before

    def test_existing_component_forced(self, project_fs: MemoryFilesystem):
        project_fs.add_file("src/components/Button/Button.js", "old")
        config = ResolvedConfig(force=True)
        generate_component(project_fs, "Button", config)
        assert project_fs.files["src/components/Button/Button.js"] != "old"

    def test_existing_check_uses_nested_path(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        project_fs.add_dir("src/components/Button")
        result = generate_component(project_fs, "forms/Button", config)
        assert "src/components/forms/Button/Button.js" in result.written

    def test_conflict_error_is_a_warning(self):
        assert ComponentExistsError.label == "Warning"
        assert ProjectRootError.label == "Error"

    def test_invalid_name(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        with pytest.raises(InvalidNameError):
            generate_component(project_fs, "forms/", config)
        assert project_fs.call_log == []

    def test_single_file_template(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        project_fs.add_file(f"{TEMPLATES}/functional.js", "export const _component = () => null;")
        result = generate_component(project_fs, "Card", config)
        assert result.template.source == "file"
        assert result.written == ["src/components/Card/Card.js"]
        assert project_fs.files["src/components/Card/Card.js"] == (
            "export const Card = () => null;"
        )

    def test_directory_template(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        project_fs.add_file(f"{TEMPLATES}/functional/_component.spec.js", "test('_component')")
        project_fs.add_file(f"{TEMPLATES}/functional/index.js", 'export * from "./_component";')
        result = generate_component(
            project_fs, "Widget", config, use_template_extension=True
        )
        assert result.template.source == "directory"
        assert project_fs.files["src/components/Widget/Widget.spec.js"] == "test('Widget')"
        assert project_fs.files["src/components/Widget/index.js"] == 'export * from "./Widget";'

    def test_class_kind_ignores_functional_template(self, project_fs: MemoryFilesystem):
        project_fs.add_file(f"{TEMPLATES}/functional.js", "functional _component")
        config = ResolvedConfig(component_kind=ComponentKind.CLASS)
        result = generate_component(project_fs, "Card", config)
        assert not result.template.found
        assert "extends Component" in project_fs.files["src/components/Card/Card.js"]

    def test_dry_run_writes_nothing(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        result = generate_component(project_fs, "Button", config, dry_run=True)
        assert result.dry_run is True
        assert [f.path for f in result.plan] == ["index.js", "Button.js"]
        assert result.written == []
        assert project_fs.call_log == []

    def test_template_read_failure_writes_nothing(
        self, project_fs: MemoryFilesystem, config: ResolvedConfig
    ):
        project_fs.add_file(f"{TEMPLATES}/functional.js", "x")
        project_fs.set_failure("read", f"{TEMPLATES}/functional.js")
        with pytest.raises(TemplateIOError):
            generate_component(project_fs, "Button", config)
        assert project_fs.call_log == []

    def test_to_dict(self, project_fs: MemoryFilesystem, config: ResolvedConfig):
        result = generate_component(project_fs, "ui/Button", config)
        assert result.to_dict() == {
            "name": "Button",
            "path": "src/components/ui/Button",
            "kind": "functional",
            "extension": ".js",
            "template": None,
            "files": [
                "src/components/ui/Button/index.js",
                "src/components/ui/Button/Button.js",
            ],
            "dry_run": False,
        }
