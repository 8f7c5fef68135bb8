# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0


class DataKeyProvisioningError(Exception):
    """Base class for every failure raised while provisioning a data key."""


class ValidationError(DataKeyProvisioningError):
    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            f"Missing required parameter(s): {', '.join(missing_fields)}"
        )


class SecretResolutionError(DataKeyProvisioningError):
    pass


class ConnectionError(DataKeyProvisioningError):  # noqa: A001
    pass


class CredentialError(DataKeyProvisioningError):
    pass


class KeyCreationError(DataKeyProvisioningError):
    pass
