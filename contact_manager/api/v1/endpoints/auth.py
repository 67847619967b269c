"""Auth API: login and token introspection.

Login is the only public write of credentials; it runs the Authenticator
(credential check, then token issuance with the user's effective access).
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from contact_manager.api.v1.dependencies import get_authenticator, get_current_claims
from contact_manager.application.services import Authenticator
from contact_manager.core.limiter import limit_auth
from contact_manager.schemas.auth import LoginRequest, TokenClaims, TokenResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
):
    """Authenticate with username and password; return a JWT embedding the user's access."""
    result = await authenticator.login(body.username, body.password)
    return TokenResponse.model_validate(result)


@router.get("/me", response_model=TokenClaims)
async def me(claims: Annotated[dict[str, Any], Depends(get_current_claims)]):
    """Return the verified claims of the bearer token."""
    return TokenClaims.model_validate(claims)
