"""Search adapter layer — Pluggable connectors for search providers.

Built-in adapters:
  - google: Google AJAX Search API (web results)

Implement ``Searcher`` to connect your own search provider.
"""
