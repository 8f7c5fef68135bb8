# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Resolution of the MongoDB connection string.

The URI either lives inside a JSON secret in Secrets Manager or is handed to the
function directly through an environment variable. Both sources expose the same
``resolve()`` call so the handler does not care which one is deployed. Nothing is
cached: every invocation reads the secret again.
"""

import json
import os
from json.decoder import JSONDecodeError
from typing import Any, Optional, Protocol, cast

from botocore.exceptions import BotoCoreError, ClientError
from layer.awsapi_cached_client import AWSCachedClient
from layer.exceptions import SecretResolutionError
from layer.powertools_logger import get_logger
from layer.settings import URI_SOURCE_ENVIRONMENT, HandlerSettings

logger = get_logger("connection_secrets")


class UriSource(Protocol):
    def resolve(self) -> str: ...


def get_secret_string(secrets_client: Any, secret_id: str) -> str:
    try:
        response = secrets_client.get_secret_value(SecretId=secret_id)
    except (ClientError, BotoCoreError) as e:
        raise SecretResolutionError(
            f"Unable to read secret {secret_id}: {str(e)}"
        ) from e

    if "SecretString" not in response:
        raise SecretResolutionError(
            f"Missing SecretString in response for {secret_id}, please ensure the secret was not stored as binary data."
        )

    return cast(str, response["SecretString"])


class SecretsManagerUriSource:
    def __init__(
        self,
        secret_id: str,
        region: str,
        uri_key: str = "MONGODB_URI",
        aws_client: Optional[AWSCachedClient] = None,
    ) -> None:
        self.secret_id = secret_id
        self.region = region
        self.uri_key = uri_key
        self.aws_client = aws_client or AWSCachedClient(region)

    def get_secret_data(self) -> dict[str, Any]:
        secret_string = get_secret_string(
            self.aws_client.get_connection("secretsmanager"), self.secret_id
        )
        try:
            data = json.loads(secret_string)
        except JSONDecodeError as e:
            raise SecretResolutionError(
                f"Secret {self.secret_id} does not contain valid JSON"
            ) from e

        if not isinstance(data, dict):
            raise SecretResolutionError(
                f"Secret {self.secret_id} must contain a JSON object"
            )
        return data

    def resolve(self) -> str:
        logger.debug(
            "Reading connection secret",
            extra={"secretId": self.secret_id, "region": self.region},
        )
        uri = self.get_secret_data().get(self.uri_key)
        if not uri:
            raise SecretResolutionError(
                f"Secret {self.secret_id} has no value for {self.uri_key}"
            )
        return str(uri)


class EnvironmentUriSource:
    def __init__(self, variable: str = "MONGODB_URI") -> None:
        self.variable = variable

    def resolve(self) -> str:
        uri = os.getenv(self.variable, "")
        if not uri:
            raise SecretResolutionError(
                f"Environment variable {self.variable} is not set"
            )
        return uri


def build_uri_source(settings: HandlerSettings) -> UriSource:
    if settings.uri_source == URI_SOURCE_ENVIRONMENT:
        return EnvironmentUriSource(settings.uri_env_var)
    return SecretsManagerUriSource(
        settings.secret_id, settings.secret_region, settings.secret_uri_key
    )
