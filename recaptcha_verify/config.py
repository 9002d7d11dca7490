# === this loads the environment so the secret and defaults below know where to look
import os

from dotenv import load_dotenv

from recaptcha_verify.models import VerificationOptions

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


RECAPTCHA_SECRET_KEY = os.getenv("RECAPTCHA_SECRET_KEY")
# Minimum score required from reCAPTCHA v3 verification, unset disables the check
RECAPTCHA_MIN_SCORE = _optional_float("RECAPTCHA_MIN_SCORE")
RECAPTCHA_EXPECTED_ACTION = os.getenv("RECAPTCHA_EXPECTED_ACTION") or None

# Allowed frontend origins (adjust as needed)
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def default_options(**overrides) -> VerificationOptions:
    """Configured defaults, with any non-None override taking precedence."""
    values = {
        "minimum_score": RECAPTCHA_MIN_SCORE,
        "expected_action": RECAPTCHA_EXPECTED_ACTION,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return VerificationOptions(**values)
