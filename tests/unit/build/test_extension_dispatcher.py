"""
Unit tests for the extension dispatcher.
"""

import pytest

from ninjagen.build.errors import ConfigurationError, UnsupportedExtensionError
from ninjagen.build.extension_dispatcher import EXTENSION_TABLE, CompileTool, dispatch, extension_of


class TestDispatch:
    """Test suite for dispatch()."""

    @pytest.mark.parametrize("path", ["m.c", "system/core/liblog/logprint.c", "dir.with.dots/x.c"])
    def test_c_sources(self, path):
        """Test .c files use the C compiler."""
        assert dispatch(path) is CompileTool.C

    @pytest.mark.parametrize("path", ["n.cpp", "a/b/zip_archive.cc", "a/b.pb.cc"])
    def test_cxx_sources(self, path):
        """Test .cpp and .cc files use the C++ compiler."""
        assert dispatch(path) is CompileTool.CXX

    @pytest.mark.parametrize("path", ["x.C", "x.CPP", "x.h", "x.cxx", "x.proto", "Makefile", "x.c.bak"])
    def test_unsupported_extension(self, path):
        """Test any other extension fails instead of guessing."""
        with pytest.raises(UnsupportedExtensionError) as exc_info:
            dispatch(path)

        assert exc_info.value.path == path

    def test_unsupported_extension_is_not_configuration_error(self):
        """Test dispatch errors are distinguishable from bad input data."""
        with pytest.raises(UnsupportedExtensionError) as exc_info:
            dispatch("lib/blob.S")

        assert not isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.extension == ".S"
        assert "lib/blob.S" in str(exc_info.value)

    def test_no_extension_message(self):
        """Test a file without extension gets a readable message."""
        with pytest.raises(UnsupportedExtensionError, match="none"):
            dispatch("src/README")


class TestCompileTool:
    """Test suite for the CompileTool enum."""

    def test_rule_names(self):
        """Test tools map onto the declared rule names."""
        assert CompileTool.C.rule == "cc"
        assert CompileTool.CXX.rule == "cxx"

    def test_table_covers_every_tool(self):
        """Test each tool is reachable from the extension table."""
        assert set(EXTENSION_TABLE.values()) == set(CompileTool)

    def test_extension_of_uses_final_suffix(self):
        """Test only the last extension counts."""
        assert extension_of("a/b.pb.cc") == ".cc"
        assert extension_of("a.b/c") == ""
