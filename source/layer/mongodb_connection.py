# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from layer.exceptions import ConnectionError
from layer.powertools_logger import get_logger
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = get_logger("mongodb_connection")


def connect_to_mongodb(
    uri: str, server_selection_timeout_ms: int = 10000
) -> MongoClient:
    """
    Open a new client and confirm the deployment is reachable.

    The client is never reused across invocations; callers own it and must
    close it. No retry is attempted beyond the driver's server selection.
    """
    try:
        client: MongoClient = MongoClient(
            uri, serverSelectionTimeoutMS=server_selection_timeout_ms
        )
    except PyMongoError as e:
        raise ConnectionError(f"Invalid MongoDB configuration: {str(e)}") from e

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise ConnectionError(f"Cannot connect to MongoDB: {str(e)}") from e

    logger.debug("Connected to MongoDB")
    return client
