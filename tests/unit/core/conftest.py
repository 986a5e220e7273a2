"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_TEMPLATE = """\
preamble is dropped
---
title: Old
source: https://example.com:8080/a
empty:
---
# Body

Text.
"""

TAGGED_TEMPLATE = """\
---
title: Tagged
tags:
- alpha
- beta
---
Body
"""


@pytest.fixture(name="sample_template")
def sample_template_fixture():
    return SAMPLE_TEMPLATE


@pytest.fixture(name="tagged_template")
def tagged_template_fixture():
    return TAGGED_TEMPLATE
