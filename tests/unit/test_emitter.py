"""Tests for the package emitter."""

import ast
from pathlib import Path
from unittest.mock import patch

import pytest

from fontpack.core.config import GeneratorConfig
from fontpack.core.exceptions import DirCreateError, FormatError, WriteError
from fontpack.generator.emitter import check_stub, emit_package, render_stub


@pytest.fixture
def config(output_dir):
    return GeneratorConfig(_env_file=None, output_dir=output_dir)


class TestRenderStub:
    """Test stub rendering."""

    def test_stub_layout(self):
        source = render_stub("dejavusansbold", "DejaVu Sans Bold", "DejaVu-Sans-Bold.ttf")

        assert source.startswith("# Code generated by fontpack; DO NOT EDIT.\n")
        assert 'Package dejavusansbold provides the "DejaVu Sans Bold" TrueType font' in source
        assert "from the DejaVu font family." in source
        assert "TTF: bytes = (Path(__file__).parent / 'DejaVu-Sans-Bold.ttf').read_bytes()" in source

    def test_stub_exposes_only_ttf(self):
        source = render_stub("dejavuserif", "DejaVu Serif", "DejaVu-Serif.ttf")
        tree = ast.parse(source)

        assigned = [node.target.id for node in tree.body if isinstance(node, ast.AnnAssign)]
        assert assigned == ["TTF"]
        assert ast.get_docstring(tree).startswith("Package dejavuserif provides")

    def test_family_is_configurable(self):
        source = render_stub("goregular", "Go Regular", "Go-Regular.ttf", family="Go")
        assert "from the Go font family." in source

    def test_rendering_is_deterministic(self):
        args = ("dejavusans", "DejaVu Sans", "DejaVu-Sans.ttf")
        assert render_stub(*args) == render_stub(*args)


class TestCheckStub:
    """Test the pre-write syntax check."""

    def test_valid_source_passes(self):
        source = render_stub("dejavusans", "DejaVu Sans", "DejaVu-Sans.ttf")
        assert check_stub("dejavusans", source) == source

    def test_invalid_source_raises_format_error(self):
        source = render_stub('bad"""name', 'Bad"""Name', 'Bad"""Name.ttf')

        with pytest.raises(FormatError, match="could not format source") as exc_info:
            check_stub('bad"""name', source)

        assert isinstance(exc_info.value.__cause__, SyntaxError)


class TestEmitPackage:
    """Test writing generated packages."""

    def test_writes_stub_and_font(self, config, output_dir, ttf_bytes):
        package = emit_package("DejaVu-Sans-Bold.ttf", ttf_bytes, output_dir, config)

        assert package.package_name == "dejavusansbold"
        assert package.font_name == "DejaVu Sans Bold"
        assert package.directory == output_dir / "dejavusansbold"
        assert package.stub_path == output_dir / "dejavusansbold" / "data.py"
        assert package.font_path.read_bytes() == ttf_bytes
        assert package.size_bytes == len(ttf_bytes)
        assert sorted(p.name for p in package.directory.iterdir()) == [
            "DejaVu-Sans-Bold.ttf",
            "data.py",
        ]

    def test_stub_loads_font_bytes(self, config, output_dir, ttf_bytes):
        package = emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        namespace = {"__file__": str(package.stub_path)}
        exec(compile(package.stub_path.read_text(), str(package.stub_path), "exec"), namespace)  # noqa: S102

        assert namespace["TTF"] == ttf_bytes

    def test_existing_directory_is_reused(self, config, output_dir, ttf_bytes):
        (output_dir / "dejavuserif").mkdir()
        (output_dir / "dejavuserif" / "data.py").write_text("stale")

        package = emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        assert package.stub_path.read_text().startswith("# Code generated by fontpack")

    def test_rerun_overwrites_identically(self, config, output_dir, ttf_bytes):
        first = emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)
        stub = first.stub_path.read_bytes()

        second = emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        assert second.stub_path.read_bytes() == stub
        assert second.font_path.read_bytes() == ttf_bytes

    def test_file_in_place_of_directory_raises_dir_create_error(
        self, config, output_dir, ttf_bytes
    ):
        (output_dir / "dejavuserif").write_text("not a directory")

        with pytest.raises(DirCreateError, match="could not create package dir"):
            emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

    def test_missing_output_dir_raises_dir_create_error(self, config, tmp_path, ttf_bytes):
        with pytest.raises(DirCreateError):
            emit_package("DejaVu-Serif.ttf", ttf_bytes, tmp_path / "a" / "b", config)

    def test_format_error_writes_nothing(self, config, output_dir, ttf_bytes):
        with pytest.raises(FormatError):
            emit_package('Bad"""Name.ttf', ttf_bytes, output_dir, config)

        assert list((output_dir / 'bad"""name').iterdir()) == []

    def test_stub_write_failure_raises_write_error(self, config, output_dir, ttf_bytes):
        original = Path.write_bytes

        def failing_write(self, data):
            if self.name == "data.py":
                raise PermissionError("read-only file system")
            return original(self, data)

        with (
            patch.object(Path, "write_bytes", failing_write),
            pytest.raises(WriteError, match="package source file"),
        ):
            emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        assert not (output_dir / "dejavuserif" / "DejaVu-Serif.ttf").exists()

    def test_font_write_failure_leaves_stub(self, config, output_dir, ttf_bytes):
        original = Path.write_bytes

        def failing_write(self, data):
            if self.suffix == ".ttf":
                raise OSError("disk full")
            return original(self, data)

        with (
            patch.object(Path, "write_bytes", failing_write),
            pytest.raises(WriteError, match="package TTF file"),
        ):
            emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        assert (output_dir / "dejavuserif" / "data.py").exists()

    def test_custom_stub_filename(self, output_dir, ttf_bytes):
        config = GeneratorConfig(_env_file=None, stub_filename="__init__.py")

        package = emit_package("DejaVu-Serif.ttf", ttf_bytes, output_dir, config)

        assert package.stub_path.name == "__init__.py"
