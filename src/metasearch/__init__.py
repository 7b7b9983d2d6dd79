"""metasearch — Search-provider adapters for a multi-engine search aggregator.

Quick start::

    import asyncio

    from metasearch import GoogleSearcher, Result

    async def main() -> list[Result]:
        results: asyncio.Queue[list[Result]] = asyncio.Queue()
        await GoogleSearcher().search("golang", results)
        return await results.get()
"""

from metasearch.adapters.base import Searcher
from metasearch.adapters.google.adapter import GoogleSearcher
from metasearch.models.result import Result

__version__ = "0.1.0"

__all__ = ["GoogleSearcher", "Result", "Searcher", "__version__"]
