"""Shared UserCSS sources for the test suite."""

import pytest

HEADER = """\
/* ==UserStyle==
@name         Name
@namespace    namespace
@description  Description
@author       Temp <temp@example.com> (https://temp.example.com)
@homepageURL  https://temp.example.com/temp/
@supportURL   https://temp.example.com/temp/issues
@updateURL    https://temp.example.com/temp/raw/temp.user.styl
@version      1.0.0
@license      MIT
@preprocessor uso
==/UserStyle== */
"""

BODY = """
@-moz-document url(https://example.com/test) {
\t:root {}
}

@-moz-document domain("example.com"), domain('example.org') {
\t:root { --hello: 'world' }
}"""

VALID_SOURCE = HEADER + BODY

MISSING_NAME_SOURCE = VALID_SOURCE.replace("@name         Name", "@name")


@pytest.fixture
def valid_source() -> str:
    return VALID_SOURCE


@pytest.fixture
def missing_name_source() -> str:
    return MISSING_NAME_SOURCE
