import logging

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from recaptcha_verify import config
from recaptcha_verify.models import VerifyRequest
from recaptcha_verify.recaptcha import verify_recaptcha

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# FastAPI app instance
app = FastAPI()

# CORS Middleware to allow cross-origin calls from frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_secret() -> str:
    secret = config.RECAPTCHA_SECRET_KEY
    if not secret:
        logger.error("RECAPTCHA_SECRET_KEY is not set")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="reCAPTCHA is not configured",
        )
    return secret


def require_recaptcha(action: str | None = None):
    """Dependency that rejects requests whose ``recaptcha_token`` fails verification."""

    async def dependency(request: Request) -> dict:
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON body")

        token = body.get("recaptcha_token") if isinstance(body, dict) else None
        if not token:
            raise HTTPException(status_code=400, detail="Missing recaptcha_token")

        secret = _require_secret()
        options = config.default_options(expected_action=action)
        result = await verify_recaptcha(secret, token, options)
        if not result.success:
            logger.info(
                "Rejected request to %s: reason=%s error=%s",
                request.url.path, result.reason, result.error,
            )
            raise HTTPException(status_code=403, detail="reCAPTCHA verification failed")
        return result.to_dict()

    return dependency


@app.post("/verify")
async def verify(req: VerifyRequest):
    """Verify a token with the server-side secret and return the full result.

    Unsuccessful verifications still answer 200; callers read ``success``,
    ``reason`` and ``error`` from the body.
    """
    secret = _require_secret()
    options = config.default_options(
        expected_action=req.expected_action,
        minimum_score=req.minimum_score,
        remote_ip=req.remote_ip,
    )
    try:
        result = await verify_recaptcha(secret, req.token, options)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


# Example route guarded by the recaptcha dependency
@app.post("/protected/echo")
async def protected_echo(
    request: Request,
    recaptcha: dict = Depends(require_recaptcha("echo")),
):
    body = await request.json()
    body.pop("recaptcha_token", None)
    return {"status": "ok", "data": body, "score": recaptcha.get("score")}
