#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

# Applied in order, on every occurrence in the URL.
REPO_URL_REPLACEMENTS = [
    ("git+ssh://git@", ""),
    ("git+https://", ""),
    ("http://", ""),
    ("https://", ""),
    ("git:", ""),
    ("git+", ""),
    (".git", ""),
]


def clean_repo_url(repo_url):
    """
    Return the `repo_url` in the "host/org/repo" form expected by the
    Scorecard API.

    >>> clean_repo_url("https://github.com/nexB/scancode.io.git")
    'github.com/nexB/scancode.io'
    >>> clean_repo_url("git+ssh://git@github.com/nexB/scancode.io")
    'github.com/nexB/scancode.io'
    """
    for old, new in REPO_URL_REPLACEMENTS:
        repo_url = repo_url.replace(old, new)
    return repo_url


def is_github_url(repo_url):
    """Return True if the `repo_url` is hosted on GitHub."""
    return "github.com" in repo_url
