"""Shared sample documents"""

import pytest


SAMPLE_POST = """\
---
title: Cool Blog Post
date: 2022-01-10
description: Lorem ipsum dolor sit amet
draft: false
slug: cool-blog-post
aliases: /old-url/
---

# Cool Blog Post

Body content.
"""


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_POST.splitlines(keepends=True)
