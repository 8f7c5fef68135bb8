# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os

from aws_lambda_powertools import Logger


def get_logger(service_name: str, log_level: str = "") -> Logger:
    """Return a structured Powertools logger for the given component name."""
    return Logger(
        service=service_name,
        level=log_level or os.getenv("LOG_LEVEL", "INFO"),
    )
