import logging
from typing import Any

import httpx

from recaptcha_verify.models import VerificationOptions, VerificationResult

VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

LOW_SCORE = "Low score"
UNEXPECTED_ACTION = "Unexpected action"

log = logging.getLogger(__name__)


def _coerce_options(options: VerificationOptions | dict | None) -> VerificationOptions:
    if options is None:
        return VerificationOptions()
    if isinstance(options, VerificationOptions):
        return options
    return VerificationOptions.model_validate(options)


async def _siteverify(client: httpx.AsyncClient, params: dict[str, str]) -> dict[str, Any]:
    resp = await client.post(VERIFY_URL, params=params)
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected siteverify payload: {data!r}")
    return data


def apply_checks(result: VerificationResult, options: VerificationOptions) -> VerificationResult:
    """Downgrade ``success`` when the score or action does not match.

    The action check runs last, so its reason wins when both fail.
    """
    if options.minimum_score is not None and result.score is not None:
        if result.score < options.minimum_score:
            result.success = False
            result.reason = LOW_SCORE

    if options.expected_action and result.action:
        if result.action != options.expected_action:
            result.success = False
            result.reason = UNEXPECTED_ACTION

    return result


async def verify_recaptcha(
    secret: str,
    token: str,
    options: VerificationOptions | dict | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
) -> VerificationResult:
    """Verify a reCAPTCHA (v2 or v3) token with Google.

    Raises ``ValueError`` when ``secret`` or ``token`` is empty. Any failure
    talking to the service is returned as ``success=False`` with ``error``
    set instead of being raised.
    """
    if not secret or not token:
        raise ValueError("Secret and token are required")

    logger = logger or log
    opts = _coerce_options(options)

    params = {"secret": secret, "response": token}
    if opts.remote_ip:
        params["remoteip"] = opts.remote_ip

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                data = await _siteverify(own_client, params)
        else:
            data = await _siteverify(client, params)
        result = VerificationResult.model_validate(data)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("reCAPTCHA verification failed: %s", e)
        return VerificationResult(success=False, error=str(e))

    result = apply_checks(result, opts)
    logger.debug(
        "reCAPTCHA result: success=%s score=%s action=%s reason=%s",
        result.success, result.score, result.action, result.reason,
    )
    return result
