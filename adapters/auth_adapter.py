"""Identity provider adapter: verifies bearer tokens and yields a Principal.

Two modes are supported:
- JWKS mode (production): tokens are RS256-signed by the identity provider
  (Firebase ID tokens by default) and checked against its published keys.
- Shared-secret mode (development/testing): HS256 tokens signed with
  ``auth_secret``.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import logging

import jwt
from jwt import ExpiredSignatureError, InvalidTokenError, PyJWKClient
from jwt.exceptions import PyJWKClientError

from app.exceptions import UnauthorizedError

logger = logging.getLogger("pantrykeeper.auth")


@dataclass(frozen=True)
class Principal:
    """Verified identity derived from a request credential."""

    subject_id: str
    email: Optional[str] = None


class TokenVerifier:
    def __init__(
        self,
        secret: Optional[str] = None,
        jwks_url: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        algorithms: Sequence[str] = ("RS256",),
        leeway: int = 10,
    ):
        self.secret = secret
        self.jwks_url = jwks_url
        self.issuer = issuer
        self.audience = audience
        self.algorithms: List[str] = list(algorithms)
        self.leeway = leeway
        self._jwks_client: Optional[PyJWKClient] = None

    @classmethod
    def from_settings(cls, settings) -> "TokenVerifier":
        if settings.auth_secret:
            return cls(
                secret=settings.auth_secret,
                issuer=settings.token_issuer,
                audience=settings.token_audience,
                algorithms=["HS256"],
            )
        return cls(
            jwks_url=settings.auth_jwks_url,
            issuer=settings.token_issuer,
            audience=settings.token_audience,
            algorithms=settings.auth_algorithms,
        )

    @property
    def is_configured(self) -> bool:
        if self.secret:
            return True
        # JWKS tokens are only trustworthy when bound to a project audience
        return bool(self.jwks_url and self.audience)

    def verify(self, token: str) -> Principal:
        """Verify ``token`` and return its Principal.

        Raises:
            UnauthorizedError: if the verifier is not configured or the token
                fails signature, expiry, issuer or audience checks
        """
        if not self.is_configured:
            logger.error("Token verification requested but identity provider is not configured")
            raise UnauthorizedError("Invalid authentication token")
        if not token:
            raise UnauthorizedError("No authentication token provided")

        try:
            claims = jwt.decode(
                token,
                self._signing_key(token),
                algorithms=self.algorithms,
                issuer=self.issuer,
                audience=self.audience,
                leeway=self.leeway,
                options={
                    "require": ["exp", "sub"],
                    "verify_aud": self.audience is not None,
                    "verify_iss": self.issuer is not None,
                },
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise UnauthorizedError("Authentication token has expired")
        except (InvalidTokenError, PyJWKClientError) as exc:
            logger.info("Rejected invalid token: %s", exc)
            raise UnauthorizedError("Invalid authentication token")

        return self._principal_from_claims(claims)

    def _signing_key(self, token: str) -> Any:
        if self.secret:
            return self.secret
        if self._jwks_client is None:
            self._jwks_client = PyJWKClient(self.jwks_url)
        return self._jwks_client.get_signing_key_from_jwt(token).key

    @staticmethod
    def _principal_from_claims(claims: Dict[str, Any]) -> Principal:
        subject = claims.get("sub") or claims.get("uid") or claims.get("user_id")
        if not subject:
            raise UnauthorizedError("Invalid authentication token")
        return Principal(subject_id=str(subject), email=claims.get("email"))
