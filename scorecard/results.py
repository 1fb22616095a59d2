#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import json
import logging
import math
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields

logger = logging.getLogger(__name__)

# Mapping of the OpenSSF Scorecard check names to the `Scorecard` attributes.
# Check names missing from this table are ignored.
CHECK_FIELDS = {
    "Maintained": "maintained",
    "Code-Review": "code_review",
    "CII-Best-Practices": "cii_best_practices",
    "License": "license",
    "Signed-Releases": "signed_releases",
    "Dangerous-Workflow": "dangerous_workflow",
    "Packaging": "packaging",
    "Token-Permissions": "token_permissions",
    "Branch-Protection": "branch_protection",
    "Binary-Artifacts": "binary_artifacts",
    "Pinned-Dependencies": "pinned_dependencies",
    "Security-Policy": "security_policy",
    "Fuzzing": "fuzzing",
    "SAST": "sast",
    "Vulnerabilities": "vulnerabilities",
    "CI-Tests": "ci_tests",
    "Contributors": "contributors",
    "Dependency-Update-Tool": "dependency_update_tool",
    "SBOM": "sbom",
    "Webhooks": "webhooks",
}


@dataclass
class Scorecard:
    """
    Normalized OpenSSF Scorecard of a repository.

    A Scorecard with all its values left to their default is the "no data"
    result.
    """

    score: float = 0.0
    pinned: bool = False
    commit_sha: str = ""
    maintained: float = 0.0
    code_review: float = 0.0
    cii_best_practices: float = 0.0
    license: float = 0.0
    signed_releases: float = 0.0
    dangerous_workflow: float = 0.0
    packaging: float = 0.0
    token_permissions: float = 0.0
    branch_protection: float = 0.0
    binary_artifacts: float = 0.0
    pinned_dependencies: float = 0.0
    security_policy: float = 0.0
    fuzzing: float = 0.0
    sast: float = 0.0
    vulnerabilities: float = 0.0
    ci_tests: float = 0.0
    contributors: float = 0.0
    dependency_update_tool: float = 0.0
    sbom: float = 0.0
    webhooks: float = 0.0

    def is_empty(self):
        """Return True if none of the fields were populated."""
        return all(
            getattr(self, field.name) == field.default for field in fields(self)
        )

    def as_dict(self):
        return asdict(self)


def get_value(data, key, default=None):
    """
    Return the value of `key` in the `data` mapping.
    Keys are compared case-insensitively when no exact match exists, following
    the upstream JSON decoding rules.
    """
    if key in data:
        return data[key]

    lowered_key = key.lower()
    for data_key, value in data.items():
        if data_key.lower() == lowered_key:
            return value

    return default


def get_score(data, key):
    """
    Return the score of `key` in `data` as a float.
    Raise a TypeError when the value is not a finite number.
    """
    value = get_value(data, key)
    if value is None:
        return 0.0

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Invalid {key} value: {value!r}")

    # NaN and Infinity are not valid JSON numbers
    if not math.isfinite(value):
        raise TypeError(f"Invalid {key} value: {value!r}")

    return float(value)


def load_scorecard_result(raw_json):
    """Load the `raw_json` Scorecard result and return it as a dict."""
    if isinstance(raw_json, bytes):
        raw_json = raw_json.decode("utf-8")

    result = json.loads(raw_json)
    if not isinstance(result, dict):
        raise TypeError("The Scorecard result is not a JSON object.")

    return result


def _map_scorecard_result(result, commit_sha):
    scorecard = Scorecard()

    repo = get_value(result, "repo") or {}
    repo_commit = get_value(repo, "commit")
    if commit_sha and repo_commit == commit_sha:
        scorecard.pinned = True
        scorecard.commit_sha = commit_sha

    if get_value(result, "score") is not None:
        scorecard.score = get_score(result, "score")
    else:
        scorecard.score = get_score(result, "AggregateScore")

    for check in get_value(result, "checks") or []:
        field_name = CHECK_FIELDS.get(get_value(check, "name"))
        if field_name:
            setattr(scorecard, field_name, get_score(check, "score"))

    return scorecard


def map_scorecard_result(raw_json, commit_sha=""):
    """
    Return a `Scorecard` from the OpenSSF Scorecard `raw_json` result.

    The same mapping applies to the Scorecard API responses and to the
    `scorecard --format json` outputs.
    The Scorecard is only "pinned" when the result commit is the `commit_sha`.
    An empty Scorecard is returned when the `raw_json` cannot be decoded.
    """
    try:
        result = load_scorecard_result(raw_json)
        return _map_scorecard_result(result, commit_sha)
    except (ValueError, TypeError, AttributeError, OverflowError) as exception:
        logger.warning(f"Scorecard result cannot be decoded: {exception}")
        return Scorecard()
