"""Shared rule-template preamble.

The top-level variables hold @PLACEHOLDER@ tokens that a later configure
stage substitutes; they are emitted literally.
"""

from typing import Dict, Tuple

from .graph import RuleTemplate

HEADER_COMMENT = "This set of commands generated by ninjagen"

DEFAULT_VARIABLES: Dict[str, str] = {
    "CC": "@CC@",
    "CXX": "@CXX@",
    "CFLAGS": "@CFLAGS@",
    "CPPFLAGS": "@CPPFLAGS@",
    "CXXFLAGS": "@CXXFLAGS@",
    "LDFLAGS": "@LDFLAGS@",
    "PLATFORM_TOOLS_VERSION": "@PV@",
}

DEFAULT_RULES: Tuple[RuleTemplate, ...] = (
    RuleTemplate("cc", "$CC -std=gnu11 $CFLAGS $CPPFLAGS $cflags -c $in -o $out"),
    RuleTemplate("cxx", "$CXX -std=gnu++2a $CXXFLAGS $CPPFLAGS $cflags -c $in -o $out"),
    RuleTemplate("lib", "$CXX -shared -Wl,-soname,$out $ldflags $LDFLAGS $in -o $out"),
    RuleTemplate("link", "$CXX $ldflags $LDFLAGS $in -o $out"),
    RuleTemplate("protoc", "protoc --cpp_out=. $in"),
    RuleTemplate("lex", "lex -o $out $in"),
    RuleTemplate("yacc", "yacc --defines=$header -o $out $in"),
    RuleTemplate("genheader", "(echo 'unsigned char $var[] = {' && xxd -i <$in && echo '};') > $out"),
)
