# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import json
from dataclasses import dataclass
from json.decoder import JSONDecodeError
from typing import Any, Optional, TypedDict

from layer.exceptions import ValidationError

REQUIRED_FIELDS = ("kmsKeyArn", "kmsKeyRegion", "dekAltName")


class MasterKey(TypedDict):
    key: str
    region: str


def parse_event(event: Any) -> dict[str, Any]:
    """
    Accept either the bare request document or an API Gateway proxy event
    whose ``body`` carries the request as a JSON string.
    """
    if not isinstance(event, dict):
        return {}

    body = event.get("body")
    if isinstance(body, str) and not any(field in event for field in REQUIRED_FIELDS):
        try:
            parsed = json.loads(body)
        except JSONDecodeError:
            return {}
        return parsed if isinstance(parsed, dict) else {}
    if isinstance(body, dict):
        return body

    return event


def _as_text(value: Any) -> Optional[str]:
    # Non-string values count as missing; strings are passed through unchanged.
    return value if isinstance(value, str) else None


@dataclass
class DataKeyRequest:
    kms_key_arn: Optional[str]
    kms_key_region: Optional[str]
    dek_alt_name: Optional[str]

    @classmethod
    def from_event(cls, event: Any) -> "DataKeyRequest":
        payload = parse_event(event)
        return cls(
            kms_key_arn=_as_text(payload.get("kmsKeyArn")),
            kms_key_region=_as_text(payload.get("kmsKeyRegion")),
            dek_alt_name=_as_text(payload.get("dekAltName")),
        )

    def missing_fields(self) -> list[str]:
        values = (self.kms_key_arn, self.kms_key_region, self.dek_alt_name)
        return [
            field
            for field, value in zip(REQUIRED_FIELDS, values)
            if not value or not value.strip()
        ]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing)

    @property
    def master_key(self) -> MasterKey:
        self.validate()
        return {"key": str(self.kms_key_arn), "region": str(self.kms_key_region)}
