"""Uniform JSON response envelopes for FastAPI services."""

from envelope_api.api.response import ResResult, error_response, success_response

__all__ = ["ResResult", "error_response", "success_response"]
