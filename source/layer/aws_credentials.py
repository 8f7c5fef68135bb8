# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import NotRequired, Optional, TypedDict

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from layer.exceptions import CredentialError


class AwsKmsCredentials(TypedDict):
    accessKeyId: str
    secretAccessKey: str
    sessionToken: NotRequired[str]


def resolve_aws_credentials(
    session: Optional[boto3.session.Session] = None,
) -> AwsKmsCredentials:
    """Resolve credentials from the default chain in the shape libmongocrypt expects."""
    session = session or boto3.session.Session()
    try:
        credentials = session.get_credentials()
        frozen = credentials.get_frozen_credentials() if credentials else None
    except (ClientError, BotoCoreError) as e:
        raise CredentialError(f"Unable to resolve AWS credentials: {str(e)}") from e

    if frozen is None or not frozen.access_key or not frozen.secret_key:
        raise CredentialError("No AWS credentials found in the credential chain")

    kms_credentials: AwsKmsCredentials = {
        "accessKeyId": frozen.access_key,
        "secretAccessKey": frozen.secret_key,
    }
    if frozen.token:
        kms_credentials["sessionToken"] = frozen.token
    return kms_credentials
