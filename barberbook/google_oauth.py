"""
Google Calendar OAuth
Builds the consent URL and exchanges/refreshes tokens against Google's token endpoint
"""
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx
from jose import JWTError, jwt

from barberbook import config

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
SCOPES = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
]
ALGORITHM = "HS256"
STATE_EXPIRE_MINUTES = 10


class GoogleOAuthError(Exception):
    pass


class GoogleOAuthClient:
    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: str,
        secret_key: str,
        http_client: Optional[httpx.Client] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.secret_key = secret_key
        self.http_client = http_client
        # user id -> latest tokens, process lifetime only
        self.tokens: Dict[str, dict] = {}

    @classmethod
    def from_config(cls) -> "GoogleOAuthClient":
        if not config.GOOGLE_CLIENT_ID or not config.GOOGLE_CLIENT_SECRET:
            logger.warning(
                "Google OAuth2 credentials not configured. Calendar integration is disabled "
                "until GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET are set."
            )
        return cls(
            client_id=config.GOOGLE_CLIENT_ID,
            client_secret=config.GOOGLE_CLIENT_SECRET,
            redirect_uri=config.GOOGLE_REDIRECT_URI,
            secret_key=config.SECRET_KEY,
        )

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def create_state(self, user_id: str) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=STATE_EXPIRE_MINUTES)
        return jwt.encode({"sub": user_id, "exp": expire}, self.secret_key, algorithm=ALGORITHM)

    def read_state(self, state: str) -> str:
        try:
            payload = jwt.decode(state, self.secret_key, algorithms=[ALGORITHM])
        except JWTError:
            raise GoogleOAuthError("Invalid or expired OAuth state")
        user_id = payload.get("sub")
        if not user_id:
            raise GoogleOAuthError("Invalid or expired OAuth state")
        return user_id

    def get_auth_url(self, user_id: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(SCOPES),
            "access_type": "offline",
            "prompt": "consent",  # forces a refresh token on every consent
            "include_granted_scopes": "true",
            "state": self.create_state(user_id),
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    def _post_token(self, data: dict) -> dict:
        client = self.http_client or httpx.Client(timeout=15.0)
        try:
            response = client.post(GOOGLE_TOKEN_URL, data=data)
        except httpx.HTTPError as e:
            raise GoogleOAuthError(f"Token request failed: {e}")
        finally:
            if self.http_client is None:
                client.close()

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code != 200:
            logger.error("❌ Google token request failed: %s", response.text)
            error = body.get("error", "")
            if error == "invalid_grant":
                raise GoogleOAuthError(
                    "OAuth authorization expired or invalid. Please try the authorization flow again."
                )
            if error == "redirect_uri_mismatch":
                raise GoogleOAuthError("Redirect URI mismatch. Please check your Google OAuth configuration.")
            raise GoogleOAuthError(f"Token exchange failed: {body.get('error_description') or error or response.status_code}")
        return body

    def exchange_code(self, code: str) -> dict:
        """Trade an authorization code for access and refresh tokens."""
        tokens = self._post_token(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": self.redirect_uri,
            }
        )
        if not tokens.get("access_token") or not tokens.get("expires_in"):
            raise GoogleOAuthError("Missing required tokens in Google response")

        return {
            "access_token": tokens["access_token"],
            "refresh_token": tokens.get("refresh_token", ""),
            "expiry_date": int(time.time() * 1000) + int(tokens["expires_in"]) * 1000,
        }

    def refresh_access_token(self, refresh_token: str) -> dict:
        tokens = self._post_token(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "refresh_token": refresh_token,
                "grant_type": "refresh_token",
            }
        )
        if not tokens.get("access_token"):
            raise GoogleOAuthError("Invalid refresh token response from Google")

        return {
            "access_token": tokens["access_token"],
            "expiry_date": int(time.time() * 1000) + int(tokens.get("expires_in", 3600)) * 1000,
        }

    def connect(self, code: str, state: str) -> dict:
        """Finish the consent flow and remember the tokens for the state's user."""
        user_id = self.read_state(state)
        tokens = self.exchange_code(code)
        self.tokens[user_id] = tokens
        logger.info("✅ Google Calendar connected for user %s", user_id)
        return {"user_id": user_id, **tokens}

    def refresh_user(self, user_id: str) -> Optional[dict]:
        """Refresh the stored access token. None if the user never connected."""
        stored = self.tokens.get(user_id)
        if stored is None:
            return None
        if not stored.get("refresh_token"):
            raise GoogleOAuthError("No refresh token stored; reconnect Google Calendar")

        refreshed = self.refresh_access_token(stored["refresh_token"])
        stored.update(refreshed)
        logger.info("🔄 Google Calendar token refreshed for user %s", user_id)
        return stored
