# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os
from dataclasses import dataclass

URI_SOURCE_SECRETS_MANAGER = "secretsmanager"
URI_SOURCE_ENVIRONMENT = "environment"
SUPPORTED_URI_SOURCES = (URI_SOURCE_SECRETS_MANAGER, URI_SOURCE_ENVIRONMENT)

DEFAULT_SECRET_ID = "staging-platform-pii-lambda"
DEFAULT_SECRET_REGION = "ap-south-1"
DEFAULT_URI_KEY = "MONGODB_URI"
DEFAULT_KEY_VAULT_NAMESPACE = "encryption.__keyVault"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 10000


@dataclass(frozen=True)
class HandlerSettings:
    """Deployment configuration for the DEK creator, read from the environment."""

    uri_source: str = URI_SOURCE_SECRETS_MANAGER
    secret_id: str = DEFAULT_SECRET_ID
    secret_region: str = DEFAULT_SECRET_REGION
    secret_uri_key: str = DEFAULT_URI_KEY
    uri_env_var: str = DEFAULT_URI_KEY
    key_vault_namespace: str = DEFAULT_KEY_VAULT_NAMESPACE
    server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS

    @classmethod
    def from_env(cls) -> "HandlerSettings":
        uri_source = os.getenv("MONGODB_URI_SOURCE", URI_SOURCE_SECRETS_MANAGER).lower()
        if uri_source not in SUPPORTED_URI_SOURCES:
            raise ValueError(
                f"Unsupported MONGODB_URI_SOURCE '{uri_source}', expected one of {', '.join(SUPPORTED_URI_SOURCES)}"
            )

        return cls(
            uri_source=uri_source,
            secret_id=os.getenv("SECRET_ID", DEFAULT_SECRET_ID),
            secret_region=os.getenv("SECRET_REGION", DEFAULT_SECRET_REGION),
            secret_uri_key=os.getenv("SECRET_URI_KEY", DEFAULT_URI_KEY),
            key_vault_namespace=os.getenv(
                "KEY_VAULT_NAMESPACE", DEFAULT_KEY_VAULT_NAMESPACE
            ),
            server_selection_timeout_ms=int(
                os.getenv(
                    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
                    str(DEFAULT_SERVER_SELECTION_TIMEOUT_MS),
                )
            ),
        )
