# session_auth/adapters/inbound/api/cookies.py

from typing import Optional

from fastapi import Request, Response

from session_auth.adapters.configuration.config import AuthConfig


class SessionCookie:
    """
    Delivery of the session token in an HTTP-only cookie.

    SameSite=None allows cross-origin frontends; Secure is only set in
    production. The max-age is a client-side hint mirroring the token
    lifetime, the signed exp claim is what counts.
    """

    PATH = "/"
    SAMESITE = "none"
    HTTPONLY = True

    def __init__(self, config: AuthConfig):
        self.name = config.cookie_name
        self.secure = config.secure_cookies
        self.max_age = int(config.token_lifetime.total_seconds())

    def set(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.name,
            value=token,
            max_age=self.max_age,
            path=self.PATH,
            secure=self.secure,
            httponly=self.HTTPONLY,
            samesite=self.SAMESITE,
        )

    def clear(self, response: Response) -> None:
        # Attributes must match the ones used when setting it
        response.delete_cookie(
            key=self.name,
            path=self.PATH,
            secure=self.secure,
            httponly=self.HTTPONLY,
            samesite=self.SAMESITE,
        )

    def read(self, request: Request) -> Optional[str]:
        """
        Token from the cookie, falling back to an ``Authorization: Bearer`` header.
        """
        token = request.cookies.get(self.name)
        if token:
            return token

        auth_header = request.headers.get("authorization", "")
        if auth_header.lower().startswith("bearer "):
            return auth_header.split(" ", 1)[1].strip() or None
        return None
