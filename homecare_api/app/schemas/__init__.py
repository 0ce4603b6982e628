"""
Pydantic schema definitions for API payloads.

Each entity (users, services, bookings, reviews) defines its own
models for request and response bodies.  The stores exchange the same
models, so a record read back from either backend validates exactly
like one received over HTTP.
"""
