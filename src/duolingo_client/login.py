"""Credential login against the Duolingo login endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from duolingo_client.config import DuolingoClientSettings, settings
from duolingo_client.errors import raise_login_rejected
from duolingo_client.logging_utils import create_logger
from duolingo_client.protocols import JsonTransportProtocol
from duolingo_client.schemas import LoginResponse

logger = create_logger("duolingo_client.login")

JWT_HEADER = "jwt"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user_id: int


async def login(
    transport: JsonTransportProtocol,
    username: str,
    password: str,
    config: DuolingoClientSettings = settings,
) -> LoginResult:
    """Exchange credentials for a JWT.

    The endpoint answers 200 even for bad credentials; rejection is signalled
    by a ``failure`` field in the body and the absence of the ``jwt`` header.

    Args:
        transport: Transport used for the request
        username: Username or email to log in as
        password: The user's password
        config: Settings providing the API host

    Returns:
        LoginResult with the token and the numeric user id

    Raises:
        DuolingoClientError: AUTHENTICATION_ERROR when credentials are rejected
        httpx.HTTPStatusError: On HTTP errors from the login endpoint
    """
    url = f"{config.BASE_URL}/login"

    res = await transport.fetch(
        "POST", url, json={"login": username, "password": password}
    )
    body = LoginResponse.model_validate(res.body)
    token = res.headers.get(JWT_HEADER)

    if body.failure or body.user_id is None or not token:
        logger.warning(
            "Login rejected",
            extra={"username": username, "failure": body.failure},
        )
        raise_login_rejected(
            operation="login",
            username=username,
            message=body.message or f"Login failed for {username}",
            failure=body.failure,
        )

    logger.info("Logged in", extra={"username": username, "user_id": body.user_id})

    return LoginResult(token=token, user_id=body.user_id)
