"""Verification of the auth provider's bearer tokens."""
import structlog
from jose import JWTError, jwt

from src.application.errors import AuthenticationError
from src.config import settings
from src.domain.entities.principal import Principal

logger = structlog.get_logger(__name__)

ALGORITHMS = ["HS256"]


class SupabaseTokenVerifier:
    """
    Decodes Supabase access tokens (HS256, signed with the project's JWT
    secret) into a Principal. Only the ``email`` and ``sub`` claims are used.
    """

    def __init__(
        self,
        secret: str = settings.supabase_jwt_secret,
        audience: str | None = settings.supabase_jwt_audience,
    ) -> None:
        self._secret = secret
        self._audience = audience or None

    def verify(self, token: str) -> Principal:
        if not self._secret:
            logger.error("jwt_secret_not_configured")
            raise AuthenticationError("Authentication is not configured.")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=ALGORITHMS,
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
        except JWTError as exc:
            logger.warning("jwt_rejected", error=str(exc))
            raise AuthenticationError("Invalid or expired access token.") from exc

        email = claims.get("email")
        if not email:
            logger.warning("jwt_missing_email_claim", sub=claims.get("sub"))
            raise AuthenticationError("Access token has no email claim.")

        return Principal(email=email, subject=claims.get("sub"))
