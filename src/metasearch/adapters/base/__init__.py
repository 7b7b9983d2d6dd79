"""Base adapter interface — Abstract classes for search provider connectors."""

from metasearch.adapters.base.adapter import Searcher
from metasearch.adapters.base.exceptions import AdapterError, ConfigurationError, ConnectionError, DecodeError

__all__ = ["AdapterError", "ConfigurationError", "ConnectionError", "DecodeError", "Searcher"]
