"""Principal Extraction & Role Check — bearer-token verification at the API boundary.

Invariants:
    - Tokens are only verified here, never issued (issuer lives outside this service)
    - A principal is {id, username, role}; role must be a known Role
    - require_role() is the only authorization check; core and services never see the principal
    - Missing/invalid token -> AuthenticationError (401); wrong role -> PermissionDeniedError (403)

Design Decisions:
    - PyJWT HS256 with claims sub/username/role, matching the issuer's tokens
    - HTTPBearer(auto_error=False): public routes share the same dependency and
      get None instead of a framework 403
    - require_roles() returns a dependency: the allowed set is visible on each route
"""

import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from holocron.config import get_settings
from holocron.core.domain_types import Role
from holocron.core.errors import AuthenticationError, PermissionDeniedError

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    id: str
    username: str
    role: Role


def decode_principal(token: str, secret: str, algorithm: str = "HS256") -> Principal:
    """Verify a bearer token and return its principal."""
    try:
        claims = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise AuthenticationError("Invalid token")

    try:
        role = Role(claims.get("role"))
    except ValueError:
        raise AuthenticationError("Token carries an unknown role")
    subject = claims.get("sub")
    if not subject:
        raise AuthenticationError("Token has no subject")
    return Principal(
        id=str(subject), username=str(claims.get("username", "")), role=role,
    )


def require_role(principal: Principal | None, allowed: frozenset[Role]) -> Principal:
    """Explicit capability check. Returns the principal when allowed."""
    if principal is None:
        raise AuthenticationError()
    if principal.role not in allowed:
        raise PermissionDeniedError(
            principal.role.value, sorted(r.value for r in allowed),
        )
    return principal


async def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Principal | None:
    """FastAPI dependency — principal from the Authorization header, or None."""
    if credentials is None:
        return None
    settings = get_settings()
    return decode_principal(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )


def require_roles(*roles: Role):
    """Build a dependency that admits only the given roles."""
    allowed = frozenset(roles)

    async def dependency(
        principal: Principal | None = Depends(get_principal),
    ) -> Principal:
        return require_role(principal, allowed)

    return dependency


require_admin = require_roles(Role.ADMIN)
require_any_role = require_roles(Role.ADMIN, Role.USER)
