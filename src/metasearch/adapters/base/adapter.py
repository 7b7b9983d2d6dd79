"""Base searcher — Abstract interface for all search provider adapters.

Every provider must implement this interface so that an orchestrator can run
several of them concurrently and fan their output in through queues.
A provider is responsible for:
  1. Querying its backend and mapping raw records to ``Result``
  2. Reporting failures as ``AdapterError`` subclasses from ``fetch()``

The shared ``search()`` method turns ``fetch()`` into the queue contract:
exactly one list of results is delivered per invocation.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any

import structlog

from metasearch.adapters.base.exceptions import AdapterError
from metasearch.models.result import Result


class Searcher(ABC):
    """Abstract base class for search provider adapters.

    Subclasses implement:
      - name: the engine name stamped on every ``Result``
      - fetch(): query the provider and return mapped results

    Searchers hold no per-request state, so one instance may serve many
    concurrent ``search()`` calls.

    Args:
        logger: Structured logger to report progress and failures to.
            Defaults to a structlog logger for this module.
    """

    def __init__(self, *, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique engine name (e.g., 'Google')."""

    @abstractmethod
    async def fetch(self, search_term: str) -> list[Result]:
        """Query the provider and return normalized results.

        Args:
            search_term: The raw, unescaped search term.

        Returns:
            Results in the order the provider returned them.

        Raises:
            ConnectionError: If the provider cannot be reached.
            DecodeError: If the provider response cannot be decoded.
        """

    async def search(self, search_term: str, results: asyncio.Queue[list[Result]]) -> None:
        """Search the provider and deliver the results on *results*.

        Exactly one list is put on the queue per call, whatever happens.
        Provider failures are logged and delivered as an empty list; they
        are never raised to the caller.

        Args:
            search_term: The raw, unescaped search term.
            results: Queue the orchestrator collects result lists from.
        """
        found: list[Result] = []
        try:
            log = self._logger.bind(engine=self.name, search_term=search_term)
            log.info("search.started")
            try:
                found = await self.fetch(search_term)
            except AdapterError as e:
                log.warning("search.failed", error_type=type(e).__name__, error=str(e))
            else:
                log.info("search.completed", results=len(found))
        finally:
            await results.put(found)
