"""Token DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthTokens:
    """액세스/리프레시 토큰 쌍."""

    access_token: str
    refresh_token: str
    token_id: str
    access_expires_at: int
    refresh_expires_at: int
