"""Locale resolution and switching.

Layers:
- domain: locale catalog, errors, repository/navigator interfaces
- core: use cases and the request-time negotiator
- infrastructure: repository bound to HTTP routing, redirect navigator
- api: presentation adapter, translator and routes
"""
