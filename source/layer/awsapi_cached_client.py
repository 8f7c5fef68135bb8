# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

import boto3
from botocore.config import Config


class AWSCachedClient:
    """
    Holds one boto3 client per service for a single region.

    Instances are created per invocation, so clients are only shared between
    calls made while handling the same request.
    """

    def __init__(self, region: str) -> None:
        self.region = region
        self.boto_config = Config(
            region_name=region,
            retries={"mode": "standard", "max_attempts": 10},
        )
        self.client: dict[str, Any] = {}

    def get_connection(self, service: str) -> Any:
        if service not in self.client:
            self.client[service] = boto3.client(service, config=self.boto_config)
        return self.client[service]
