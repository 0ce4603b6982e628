"""
HTTP layer.

``router`` aggregates the domain routers in ``endpoints`` and is
mounted under ``/api`` by ``main.create_app``.  ``error_handlers``
shapes every error response as ``{"message": ..., "field": ...}``.
"""
