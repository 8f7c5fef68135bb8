# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import uuid

from bson.binary import STANDARD, Binary
from bson.codec_options import CodecOptions
from layer.aws_credentials import AwsKmsCredentials
from layer.data_key_request import MasterKey
from layer.exceptions import KeyCreationError
from layer.settings import DEFAULT_KEY_VAULT_NAMESPACE
from pymongo import MongoClient
from pymongo.encryption import ClientEncryption
from pymongo.errors import PyMongoError

AWS_KMS_PROVIDER = "aws"


def build_client_encryption(
    mongo_client: MongoClient,
    credentials: AwsKmsCredentials,
    key_vault_namespace: str = DEFAULT_KEY_VAULT_NAMESPACE,
) -> ClientEncryption:
    try:
        return ClientEncryption(
            {AWS_KMS_PROVIDER: dict(credentials)},
            key_vault_namespace,
            mongo_client,
            CodecOptions(uuid_representation=STANDARD),
        )
    except PyMongoError as e:
        raise KeyCreationError(
            f"Unable to initialise client encryption: {str(e)}"
        ) from e


def create_aws_data_key(
    client_encryption: ClientEncryption, master_key: MasterKey, alt_name: str
) -> Binary:
    # Not deduplicated: an existing key with the same alt name is not reused.
    try:
        return client_encryption.create_data_key(
            AWS_KMS_PROVIDER,
            master_key=dict(master_key),
            key_alt_names=[alt_name],
        )
    except PyMongoError as e:
        raise KeyCreationError(f"Failed to create data key: {str(e)}") from e


def key_id_to_uuid(key_id: bytes) -> str:
    key_bytes = bytes(key_id)
    if len(key_bytes) != 16:
        raise KeyCreationError(
            f"Unexpected data key id length {len(key_bytes)}, expected 16 bytes"
        )
    return str(uuid.UUID(bytes=key_bytes))
