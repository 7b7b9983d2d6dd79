"""Google adapter — Web search via the Google AJAX Search API.

Issues a single GET per search and maps the returned web results to
``Result`` records tagged with the ``Google`` engine name.

API reference:
  GET /ajax/services/search/web
    ?v=<api_version>
    &rsz=<page_size>
    &q=<query>

Usage::

    searcher = GoogleSearcher()
    results: asyncio.Queue[list[Result]] = asyncio.Queue()
    await searcher.search("golang", results)
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote_plus

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from metasearch.adapters.base.adapter import Searcher
from metasearch.adapters.base.exceptions import ConfigurationError, ConnectionError, DecodeError
from metasearch.config.settings import GoogleSettings
from metasearch.models.result import Result


class GoogleResult(BaseModel):
    """A single raw web result as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    gsearch_result_class: str = Field(default="", alias="GsearchResultClass")
    unescaped_url: str = Field(default="", alias="unescapedUrl")
    url: str = Field(default="")
    visible_url: str = Field(default="", alias="visibleUrl")
    cache_url: str = Field(default="", alias="cacheUrl")
    title: str = Field(default="")
    title_no_formatting: str = Field(default="", alias="titleNoFormatting")
    content: str = Field(default="")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class GoogleResponseData(BaseModel):
    """The ``responseData`` envelope."""

    results: list[GoogleResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_to_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if r is None else r for r in v]
        return v


class GoogleResponse(BaseModel):
    """Top-level API document."""

    model_config = ConfigDict(populate_by_name=True)

    response_data: GoogleResponseData | None = Field(default=None, alias="responseData")
    response_status: int | None = Field(default=None, alias="responseStatus")
    response_details: str | None = Field(default=None, alias="responseDetails")

    # Diagnostics only; a malformed value must not cost the results.
    @field_validator("response_status", mode="before")
    @classmethod
    def _lenient_status(cls, v: Any) -> int | None:
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return None

    @field_validator("response_details", mode="before")
    @classmethod
    def _lenient_details(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @property
    def results(self) -> list[GoogleResult]:
        return self.response_data.results if self.response_data else []


class GoogleSearcher(Searcher):
    """Search adapter for the Google AJAX Search API.

    Args:
        settings: Endpoint and paging configuration. Defaults to ``GoogleSettings()``.
        client: Optional caller-owned ``httpx.AsyncClient``. When omitted, a
            short-lived client with httpx's default timeout is opened for
            each request; it follows redirects.
        logger: Structured logger (see ``Searcher``).
    """

    def __init__(
        self,
        settings: GoogleSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        logger: Any = None,
    ) -> None:
        super().__init__(logger=logger)
        self._settings = settings or GoogleSettings()
        if not self._settings.endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"Google endpoint must be an http(s) URL, got: {self._settings.endpoint!r}")
        self._client = client

    @property
    def name(self) -> str:
        return self._settings.engine_name

    def build_url(self, search_term: str) -> str:
        """Build the request URL, escaping *search_term* (spaces become ``+``)."""
        return (
            f"{self._settings.endpoint}"
            f"?v={self._settings.api_version}"
            f"&rsz={self._settings.page_size}"
            f"&q={quote_plus(search_term)}"
        )

    async def fetch(self, search_term: str) -> list[Result]:
        """Run one search against Google and map the web results.

        Blank terms return no results without contacting the API.

        Raises:
            ConnectionError: On any transport failure.
            DecodeError: If the body is not a valid API document.
        """
        log = self._logger.bind(engine=self.name, search_term=search_term)
        if not search_term.strip():
            log.info("search.skipped", reason="blank search term")
            return []

        url = self.build_url(search_term)
        log.debug("search.request", url=url)

        try:
            response = await self._get(url)
        except httpx.RequestError as e:
            raise ConnectionError(f"Google request failed: {e!r}") from e

        # The API reports failures in the body, so decode whatever came back.
        try:
            document = GoogleResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Google response could not be decoded (HTTP {response.status_code}): {e.errors()[0]['msg']}"
            ) from e

        if document.response_status not in (None, 200):
            log.warning(
                "search.provider_status",
                status=document.response_status,
                details=document.response_details,
            )

        return [self.map_to_result(raw) for raw in document.results]

    def map_to_result(self, raw: GoogleResult) -> Result:
        """Map a raw Google web result to ``Result``."""
        return Result(
            engine=self.name,
            title=raw.title,
            link=raw.url,
            content=raw.content,
        )

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await client.get(url)
