"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds
configuration, logging, database access and seeding; ``storage`` holds
the entity store contract and its two backends; ``services`` holds the
booking lifecycle, role scoping and dashboard statistics; ``api``
exposes the HTTP routers.
"""

from .main import app  # noqa: F401
