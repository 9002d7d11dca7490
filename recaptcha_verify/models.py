from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VerificationOptions(BaseModel):
    """Local checks applied on top of the siteverify response."""

    model_config = ConfigDict(populate_by_name=True)

    minimum_score: float | None = Field(default=None, alias="minimumScore")
    expected_action: str | None = Field(default=None, alias="expectedAction")
    remote_ip: str | None = Field(default=None, alias="remoteIp")


class VerificationResult(BaseModel):
    """Decoded siteverify response.

    Unknown fields sent by the service are kept as extras so nothing the
    caller might rely on is dropped. ``reason`` is set when a local check
    downgrades ``success``; ``error`` is set when the call itself failed.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    success: bool = False
    score: float | None = None
    action: str | None = None
    challenge_ts: str | None = None
    hostname: str | None = None
    error_codes: list[str] | None = Field(default=None, alias="error-codes")
    reason: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        # only what the service sent plus what we injected, under wire names
        return self.model_dump(by_alias=True, exclude_unset=True)


# === HTTP surface request body ===
class VerifyRequest(BaseModel):
    token: str
    expected_action: str | None = None
    minimum_score: float | None = None
    remote_ip: str | None = None
