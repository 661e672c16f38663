"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Success schemas never declare an `error` field
    - Error schema declares only `error`
"""
