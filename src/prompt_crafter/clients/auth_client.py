"""Firebase Authentication (Identity Toolkit REST) wrapper.

Handles e-mail/password sign-in and sign-up, local sign-out, and session
observers. The client holds the current ``Session`` explicitly; callers
pass it back in (``session=``) instead of reading global state.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import datetime, timezone

import httpx

from prompt_crafter.errors import AuthError, InvalidArgument
from prompt_crafter.models.session import Session

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://identitytoolkit.googleapis.com/v1"

SessionObserver = Callable[[Session | None], None]


class FirebaseAuthClient:
    """Async e-mail/password identity provider backed by Firebase."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        session: Session | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        key = api_key or os.environ.get("FIREBASE_API_KEY")
        if not key:
            raise ValueError(
                "Firebase API key required. Set FIREBASE_API_KEY env var or pass api_key."
            )
        self._api_key = key
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._observers: list[SessionObserver] = []
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> FirebaseAuthClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    @property
    def current_session(self) -> Session | None:
        return self._session

    def observe_session(self, callback: SessionObserver) -> Callable[[], None]:
        """Register callback for session changes; returns an unsubscribe function.

        The callback fires immediately with the current session.
        """
        self._observers.append(callback)
        callback(self._session)

        def _unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return _unsubscribe

    def _set_session(self, session: Session | None) -> None:
        self._session = session
        for callback in list(self._observers):
            callback(session)

    async def sign_in(self, email: str, password: str) -> Session:
        data = await self._call(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        session = await self._build_session(data)
        logger.info("Signed in uid=%s", session.uid)
        self._set_session(session)
        return session

    async def sign_up(
        self,
        email: str,
        password: str,
        confirm_password: str | None = None,
    ) -> Session:
        if confirm_password is not None and confirm_password != password:
            raise InvalidArgument("Passwords do not match")
        data = await self._call(
            "accounts:signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        session = await self._build_session(data)
        logger.info("Signed up uid=%s", session.uid)
        self._set_session(session)
        return session

    async def sign_out(self) -> None:
        if self._session is not None:
            logger.info("Signed out uid=%s", self._session.uid)
        self._set_session(None)

    async def _call(self, endpoint: str, payload: dict) -> dict:
        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self.http_client.post(
                url, params={"key": self._api_key}, json=payload
            )
        except httpx.RequestError as e:
            logger.error("Auth request to %s failed: %s", endpoint, e)
            raise AuthError("NETWORK_REQUEST_FAILED") from e
        if response.is_error:
            message, code = _provider_error(response)
            logger.info("Auth %s rejected: %s", endpoint, message)
            raise AuthError(message, code=code)
        try:
            return response.json()
        except ValueError as e:
            raise AuthError("INVALID_RESPONSE") from e

    async def _build_session(self, data: dict) -> Session:
        try:
            uid = data["localId"]
            email = data.get("email", "")
        except (KeyError, TypeError) as e:
            raise AuthError("INVALID_RESPONSE") from e
        id_token = data.get("idToken")
        display_name = data.get("displayName") or None
        created_at = None

        account = await self._lookup(id_token) if id_token else None
        if account:
            display_name = account.get("displayName") or display_name
            created_at = _parse_millis(account.get("createdAt"))

        return Session(
            uid=uid,
            email=email,
            display_name=display_name,
            created_at=created_at,
            id_token=id_token,
        )

    async def _lookup(self, id_token: str) -> dict | None:
        """Fetch account details; profile extras are best-effort."""
        try:
            data = await self._call("accounts:lookup", {"idToken": id_token})
            return data["users"][0]
        except (AuthError, KeyError, IndexError, TypeError):
            logger.warning("Account lookup failed", exc_info=True)
            return None


def _provider_error(response: httpx.Response) -> tuple[str, int | None]:
    try:
        error = response.json()["error"]
        return str(error["message"]), error.get("code", response.status_code)
    except (ValueError, KeyError, TypeError):
        return f"HTTP_{response.status_code}", response.status_code


def _parse_millis(value) -> datetime | None:
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    except (TypeError, ValueError):
        return None
