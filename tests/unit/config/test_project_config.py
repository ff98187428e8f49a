"""
Unit tests for the project description parser.
"""

import pytest

from ninjagen.build.errors import ConfigurationError
from ninjagen.build.link_aggregator import LinkKind
from ninjagen.config.project_config import BlobSpec, ProjectConfig, ProjectConfigError, SubninjaSpec


class TestProjectConfig:
    """Test suite for ProjectConfig parser."""

    @pytest.fixture
    def full_project(self, write_project):
        """Project using every section kind."""
        return write_project(
            """
[ninjagen]
description = test project

[variables]
CC = @CC@
PLATFORM_TOOLS_VERSION = 28.0.0

[component:libbase]
dir = system/core/base
sources =
    file.cpp
    logging.cpp
cflags = -fPIC -Isystem/core/base/include
order_deps = gen/font.h

[component:tool]
sources = tool/main.c tool/grammar.yy

[blob:font]
input = res/font.bin
symbol = font_data
output = gen/font.h

[subninja:zlib]
dir = external/zlib/
artifacts =
    libz.a

[library:libbase.so]
components = libbase

[executable:tool]
components = tool libbase
subninjas = zlib
objects = prebuilt/crt0.o
ldflags = -lz -lm
"""
        )

    def test_full_project(self, full_project):
        """Test every section kind is parsed."""
        project = ProjectConfig.from_file(full_project)

        assert project.source == str(full_project)
        assert project.description == "test project"
        assert project.variables == {"CC": "@CC@", "PLATFORM_TOOLS_VERSION": "28.0.0"}

        libbase, tool = project.components
        assert libbase.name == "libbase"
        assert libbase.sources == ("system/core/base/file.cpp", "system/core/base/logging.cpp")
        assert libbase.options.cflags == "-fPIC -Isystem/core/base/include"
        assert libbase.options.order_deps == ("gen/font.h",)
        assert tool.sources == ("tool/main.c", "tool/grammar.yy")
        assert tool.options.order_deps is None

        assert project.blobs == [BlobSpec("font", "res/font.bin", "font_data", "gen/font.h")]
        assert project.subninjas == [SubninjaSpec("zlib", "external/zlib/", ("libz.a",))]

        library, tool_target = project.link_targets
        assert library.output == "libbase.so"
        assert library.kind is LinkKind.SHARED_LIBRARY
        assert library.ldflags == ""
        assert tool_target.kind is LinkKind.EXECUTABLE
        assert tool_target.components == ("tool", "libbase")
        assert tool_target.subninjas == ("zlib",)
        assert tool_target.objects == ("prebuilt/crt0.o",)
        assert tool_target.ldflags == "-lz -lm"

    def test_no_interpolation(self):
        """Test $ and % survive parsing."""
        project = ProjectConfig.from_string("[component:x]\nsources = x.c\ncflags = -DPCT=100% -DV=$VERSION\n")

        assert project.components[0].options.cflags == "-DPCT=100% -DV=$VERSION"

    def test_empty_order_deps(self):
        """Test an empty order_deps entry is kept as empty, not absent."""
        project = ProjectConfig.from_string("[component:x]\nsources = x.c\norder_deps =\n")

        assert project.components[0].options.order_deps == ()

    def test_blob_without_output(self):
        """Test the blob output is optional."""
        project = ProjectConfig.from_string("[blob:b]\ninput = b.bin\nsymbol = b\n")

        assert project.blobs[0].output is None

    def test_missing_sources(self):
        """Test a component without sources is a configuration error."""
        with pytest.raises(ProjectConfigError, match="component 'x' has no sources"):
            ProjectConfig.from_string("[component:x]\ncflags = -O2\n")

    def test_missing_required_field(self):
        """Test required blob fields are enforced."""
        with pytest.raises(ProjectConfigError, match="missing required field 'symbol'"):
            ProjectConfig.from_string("[blob:b]\ninput = b.bin\n")

    def test_unknown_section(self):
        """Test unknown sections are rejected."""
        with pytest.raises(ProjectConfigError, match=r"unknown section \[archive:x\]"):
            ProjectConfig.from_string("[archive:x]\nsources = x.c\n")

    def test_section_without_name(self):
        """Test typed sections need a name."""
        with pytest.raises(ProjectConfigError):
            ProjectConfig.from_string("[component:]\nsources = x.c\n")

    def test_duplicate_section(self):
        """Test duplicate sections surface as parse errors."""
        with pytest.raises(ProjectConfigError, match="Failed to parse"):
            ProjectConfig.from_string("[component:x]\nsources = x.c\n[component:x]\nsources = y.c\n")

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported."""
        with pytest.raises(ProjectConfigError, match="not found"):
            ProjectConfig.from_file(tmp_path / "nope.ini")

    def test_invalid_utf8_file(self, tmp_path):
        """Test undecodable bytes are reported as a project file error."""
        path = tmp_path / "project.ini"
        path.write_bytes(b"[component:x]\nsources = m\xff.c\n")

        with pytest.raises(ProjectConfigError, match="Failed to read project file"):
            ProjectConfig.from_file(path)

    def test_directory_instead_of_file(self, tmp_path):
        """Test a directory path is reported as a project file error."""
        with pytest.raises(ProjectConfigError, match="Failed to read project file"):
            ProjectConfig.from_file(tmp_path)

    def test_error_is_configuration_error(self):
        """Test parser errors belong to the configuration error family."""
        assert issubclass(ProjectConfigError, ConfigurationError)


class TestBuiltinConfigs:
    """Test suite for the shipped project descriptions."""

    def test_builtin_names(self):
        """Test the base and dexdump descriptions are shipped."""
        assert ProjectConfig.builtin_names() == ["base", "dexdump"]

    def test_load_builtin(self):
        """Test a built-in description loads."""
        project = ProjectConfig.builtin("dexdump")

        assert [c.name for c in project.components] == ["libdex", "dexdump"]
        assert project.link_targets[0].kind is LinkKind.EXECUTABLE

    def test_unknown_builtin(self):
        """Test an unknown name lists the available ones."""
        with pytest.raises(ProjectConfigError, match="Available configurations: base, dexdump"):
            ProjectConfig.builtin("nope")
