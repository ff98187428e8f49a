"""
Setup file.
"""

from setuptools import setup

KEYWORDS = "ninja build-graph generator android native subninja protoc yacc lex"


if __name__ == "__main__":
    setup(
        keywords=KEYWORDS,
        package_data={"ninjagen": ["configs/*.ini"]},
        include_package_data=True)
