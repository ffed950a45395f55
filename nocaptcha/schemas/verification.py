"""
siteverify response model.

Google answers with a small JSON object; only ``success`` is guaranteed.
The hyphenated ``error-codes`` key is exposed as ``error_codes``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class VerificationResult(BaseModel):
    """Outcome of one siteverify call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    success: bool = False
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
    challenge_ts: Optional[datetime] = None
    hostname: Optional[str] = None
    apk_package_name: Optional[str] = None

    # v3 only
    score: Optional[float] = None
    action: Optional[str] = None

    @field_validator("success", mode="before")
    @classmethod
    def _only_json_true(cls, v: Any) -> bool:
        # 1, "true" and friends are not a success
        return v is True

    @field_validator(
        "challenge_ts", "hostname", "apk_package_name", "score", "action", mode="wrap"
    )
    @classmethod
    def _drop_malformed(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        # informational only; a bad value never decides the outcome
        try:
            return handler(v)
        except ValidationError:
            return None
