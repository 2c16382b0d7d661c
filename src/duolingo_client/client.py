"""High-level client for the Duolingo API."""

from __future__ import annotations

import json
from collections.abc import Sequence
from types import TracebackType
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from duolingo_client.config import DuolingoClientSettings, settings
from duolingo_client.errors import raise_authentication_required, raise_language_not_active
from duolingo_client.logging_utils import create_logger
from duolingo_client.login import login as request_login
from duolingo_client.mappers import map_language, map_skill, map_translations, map_user
from duolingo_client.models import Language, Skill, Translations, User
from duolingo_client.protocols import JsonTransportProtocol
from duolingo_client.schemas import SkillResponse, UserProfileResponse
from duolingo_client.session import Session
from duolingo_client.transport import JsonHttpTransport

logger = create_logger("duolingo_client.client")

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_HINTS_ADAPTER: TypeAdapter[dict[str, list[str] | None]] = TypeAdapter(
    dict[str, list[str] | None]
)


def encode_tokens(words: Sequence[str]) -> str:
    """Serialize words as compact JSON and percent-escape the result."""
    serialized = json.dumps(list(words), separators=(",", ":"), ensure_ascii=False)
    return quote(serialized, safe=_URI_COMPONENT_SAFE)


class DuolingoClient:
    """Client for the Duolingo web API.

    New instances are logged out. Unauthenticated calls work in either state;
    ``get_skill`` requires a prior ``login``.

    The client either borrows an ``httpx.AsyncClient`` (or a whole transport)
    from the caller, or creates its own from settings. Only a client it created
    itself is closed by ``aclose``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        transport: JsonTransportProtocol | None = None,
        config: DuolingoClientSettings = settings,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Shared httpx AsyncClient; created from settings if omitted
            transport: Transport overriding the httpx-based default
            config: Settings providing API hosts and HTTP timeouts
        """
        self._config = config
        self._owned_client: httpx.AsyncClient | None = None

        if transport is None:
            if http_client is None:
                http_client = httpx.AsyncClient(
                    timeout=httpx.Timeout(
                        config.HTTP_CLIENT_TIMEOUT_SECONDS,
                        connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
                    ),
                    headers={"User-Agent": config.USER_AGENT},
                )
                self._owned_client = http_client
            transport = JsonHttpTransport(http_client)

        self._transport = transport
        self._session: Session | None = None

    async def __aenter__(self) -> DuolingoClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None

    # --- Session management ---

    @property
    def session(self) -> Session | None:
        """The current session, or None when logged out."""
        return self._session

    @property
    def is_logged_in(self) -> bool:
        """Whether a login succeeded since creation or the last logout."""
        return self._session is not None

    async def login(self, username: str, password: str) -> None:
        """Log in as the given user.

        Later authenticated calls use this user's credentials. Any previous
        session is replaced, even one for the same user.

        Raises:
            DuolingoClientError: AUTHENTICATION_ERROR when credentials are rejected
            httpx.HTTPStatusError: On HTTP errors from the login endpoint
        """
        result = await request_login(self._transport, username, password, self._config)
        self._session = Session.from_login(
            username=username, user_id=result.user_id, token=result.token
        )

    def logout(self) -> None:
        """Discard the current credentials. Safe to call when logged out."""
        if self._session is not None:
            logger.info("Logged out", extra={"username": self._session.username})
        self._session = None

    def _session_headers(self) -> dict[str, str] | None:
        if self._session is None:
            return None
        return self._session.headers

    # --- Resource fetchers ---

    async def _fetch_profile(self, username: str) -> UserProfileResponse:
        # The profile carries more data when requested by the same user
        url = f"{self._config.BASE_URL}/users/{username}"
        res = await self._transport.fetch("GET", url, self._session_headers())
        return UserProfileResponse.model_validate(res.body)

    async def get_user(self, username: str) -> User:
        """Fetch a user by username.

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the profile endpoint
        """
        profile = await self._fetch_profile(username)
        user = map_user(profile)

        logger.debug(
            "Fetched user",
            extra={"username": username, "language_count": len(user.languages)},
        )

        return user

    async def get_language(self, language: str, username: str) -> Language:
        """Fetch a language and its skill tree.

        Skill trees are only exposed through the profile of a user learning
        the language, hence the username. The result holds no user data.

        Args:
            language: Id of the language to fetch
            username: A user currently learning that language

        Raises:
            DuolingoClientError: LANGUAGE_NOT_ACTIVE when the profile has no
                data for the language
            httpx.HTTPStatusError: On HTTP errors from the profile endpoint
        """
        # TODO: Find a way to discover skills without going through a user profile
        profile = await self._fetch_profile(username)
        data = profile.language_data.get(language)
        if not data:
            raise_language_not_active(
                operation="get_language", language=language, username=username
            )

        return map_language(data)

    async def get_skill(self, skill_id: str) -> Skill:
        """Fetch a skill with the words of all its lessons.

        Raises:
            DuolingoClientError: AUTHENTICATION_REQUIRED when logged out
            httpx.HTTPStatusError: On HTTP errors from the skill endpoint
        """
        headers = self._session_headers()
        if headers is None:
            raise_authentication_required(operation="get_skill", skill_id=skill_id)

        url = f"{self._config.BASE_URL}/api/1/skills/show?id={skill_id}"
        res = await self._transport.fetch("GET", url, headers)
        skill = map_skill(SkillResponse.model_validate(res.body))

        logger.debug(
            "Fetched skill",
            extra={"skill_id": skill_id, "word_count": len(skill.words)},
        )

        return skill

    async def translate(self, source: str, target: str, words: Sequence[str]) -> Translations:
        """Translate a list of words.

        Args:
            source: Id of the language to translate from
            target: Id of the language to translate to
            words: Words to translate; order and duplicates are kept

        Returns:
            One entry per input word: its candidate translations, or None when
            the dictionary returned nothing for it

        Raises:
            httpx.HTTPStatusError: On HTTP errors from the dictionary endpoint
        """
        tokens = encode_tokens(words)
        url = (
            f"{self._config.DICTIONARY_URL}/api/1/dictionary/hints/"
            f"{target}/{source}?tokens={tokens}"
        )
        res = await self._transport.fetch("GET", url)
        hints = _HINTS_ADAPTER.validate_python(res.body)

        return map_translations(words, hints)
