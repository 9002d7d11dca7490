from recaptcha_verify.models import VerificationOptions, VerificationResult
from recaptcha_verify.recaptcha import VERIFY_URL, verify_recaptcha

__all__ = ["VERIFY_URL", "VerificationOptions", "VerificationResult", "verify_recaptcha"]
