"""
Top‑level package for the Home Healthcare Booking API.

This file makes ``homecare_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``homecare_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
