"""
Pydantic schemas for API request and response validation.

All FastAPI endpoints use Pydantic models with explicit types. The language
model output is validated with the same tooling before it is trusted.
"""
