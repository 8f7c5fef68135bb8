# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import json
from typing import TypedDict

# Failures are reported in the body; the transport status never changes.
STATUS_CODE = 200


class LambdaResponse(TypedDict):
    statusCode: int
    body: str


def success_response(data_key_uuid: str) -> LambdaResponse:
    return {
        "statusCode": STATUS_CODE,
        "body": json.dumps({"dataKeyUUID": data_key_uuid}),
    }


def error_response(error: Exception) -> LambdaResponse:
    return {
        "statusCode": STATUS_CODE,
        "body": json.dumps({"message": "error", "error": str(error)}),
    }
