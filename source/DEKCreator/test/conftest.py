# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os

import pytest


@pytest.fixture(scope="module", autouse=True)
def aws_credentials():
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(autouse=True)
def clean_handler_environment(monkeypatch):
    for variable in (
        "MONGODB_URI",
        "MONGODB_URI_SOURCE",
        "SECRET_ID",
        "SECRET_REGION",
        "SECRET_URI_KEY",
        "KEY_VAULT_NAMESPACE",
        "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
        "ENV",
        "EVENT_FILE",
    ):
        monkeypatch.delenv(variable, raising=False)
