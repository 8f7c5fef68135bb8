# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Creates a MongoDB CSFLE data encryption key wrapped by an AWS KMS key.

The caller always receives HTTP 200; success and failure are told apart by the
body, which holds either ``dataKeyUUID`` or ``message: "error"``.
"""

import json
import os
import sys
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

from layer.aws_credentials import AwsKmsCredentials, resolve_aws_credentials
from layer.connection_secrets import UriSource, build_uri_source
from layer.data_key_request import DataKeyRequest
from layer.exceptions import DataKeyProvisioningError
from layer.key_vault import build_client_encryption, create_aws_data_key, key_id_to_uuid
from layer.lambda_response import LambdaResponse, error_response, success_response
from layer.mongodb_connection import connect_to_mongodb
from layer.powertools_logger import get_logger
from layer.settings import HandlerSettings
from pymongo import MongoClient
from pymongo.encryption import ClientEncryption

logger = get_logger("dek_creator")


@dataclass
class Dependencies:
    """Collaborators used by one invocation, built fresh unless injected."""

    uri_source: UriSource
    connect: Callable[[str], MongoClient]
    resolve_credentials: Callable[[], AwsKmsCredentials]
    client_encryption_factory: Callable[
        [MongoClient, AwsKmsCredentials], ClientEncryption
    ]

    @classmethod
    def from_settings(cls, settings: HandlerSettings) -> "Dependencies":
        return cls(
            uri_source=build_uri_source(settings),
            connect=partial(
                connect_to_mongodb,
                server_selection_timeout_ms=settings.server_selection_timeout_ms,
            ),
            resolve_credentials=resolve_aws_credentials,
            client_encryption_factory=partial(
                build_client_encryption,
                key_vault_namespace=settings.key_vault_namespace,
            ),
        )


def close_quietly(resource: Any, name: str) -> None:
    """Close a per-invocation resource without masking the invocation outcome."""
    try:
        resource.close()
    except Exception as e:
        logger.warning(
            f"Failed to close {name}", extra={"resource": name, "error": str(e)}
        )


def create_data_key(request: DataKeyRequest, dependencies: Dependencies) -> str:
    request.validate()

    uri = dependencies.uri_source.resolve()
    mongo_client = dependencies.connect(uri)
    try:
        credentials = dependencies.resolve_credentials()
        client_encryption = dependencies.client_encryption_factory(
            mongo_client, credentials
        )
        try:
            key_id = create_aws_data_key(
                client_encryption, request.master_key, str(request.dek_alt_name)
            )
        finally:
            close_quietly(client_encryption, "ClientEncryption")
    finally:
        close_quietly(mongo_client, "MongoClient")

    return key_id_to_uuid(key_id)


def lambda_handler(
    event: Any, context: Any, dependencies: Optional[Dependencies] = None
) -> LambdaResponse:
    request = DataKeyRequest.from_event(event)

    try:
        data_key_uuid = create_data_key(
            request,
            dependencies or Dependencies.from_settings(HandlerSettings.from_env()),
        )
    except DataKeyProvisioningError as e:
        logger.error(
            "Failed to provision data key",
            extra={
                "errorType": type(e).__name__,
                "dekAltName": request.dek_alt_name,
                "error": str(e),
            },
        )
        return error_response(e)
    except Exception as e:
        logger.exception(
            "Unexpected error provisioning data key",
            extra={"dekAltName": request.dek_alt_name, "error": str(e)},
        )
        return error_response(e)

    logger.info(
        "Created data key",
        extra={
            "dataKeyUUID": data_key_uuid,
            "dekAltName": request.dek_alt_name,
            "kmsKeyArn": request.kms_key_arn,
            "kmsKeyRegion": request.kms_key_region,
        },
    )
    return success_response(data_key_uuid)


def run_local(event_file: str = "event.json") -> LambdaResponse:
    with open(event_file, encoding="utf-8") as f:
        event = json.load(f)
    return lambda_handler(event, None)


def main() -> int:
    if os.getenv("ENV") != "local":
        logger.warning(
            "Local invocation skipped, set ENV=local to run the handler with an event file",
            extra={"env": os.getenv("ENV", "")},
        )
        return 1

    print(json.dumps(run_local(os.getenv("EVENT_FILE", "event.json")), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
