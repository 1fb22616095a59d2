#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

from rest_framework import serializers


class ScorecardSerializer(serializers.Serializer):
    """Read-only representation of a `scorecard.results.Scorecard`."""

    score = serializers.FloatField()
    pinned = serializers.BooleanField()
    commitSha = serializers.CharField(source="commit_sha")
    maintained = serializers.FloatField()
    codeReview = serializers.FloatField(source="code_review")
    ciiBestPractices = serializers.FloatField(source="cii_best_practices")
    license = serializers.FloatField()
    signedReleases = serializers.FloatField(source="signed_releases")
    dangerousWorkflow = serializers.FloatField(source="dangerous_workflow")
    packaging = serializers.FloatField()
    tokenPermissions = serializers.FloatField(source="token_permissions")
    branchProtection = serializers.FloatField(source="branch_protection")
    binaryArtifacts = serializers.FloatField(source="binary_artifacts")
    pinnedDependencies = serializers.FloatField(source="pinned_dependencies")
    securityPolicy = serializers.FloatField(source="security_policy")
    fuzzing = serializers.FloatField()
    sast = serializers.FloatField()
    vulnerabilities = serializers.FloatField()
    ciTests = serializers.FloatField(source="ci_tests")
    contributors = serializers.FloatField()
    dependencyUpdateTool = serializers.FloatField(source="dependency_update_tool")
    sbom = serializers.FloatField()
    webhooks = serializers.FloatField()
