"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - GenerateRequest: Incoming prompt payload
    - GenerateResponse: Complete generated text
    - ErrorResponse: Uniform failure payload
"""

from aichatbot.models.schemas import ErrorResponse, GenerateRequest, GenerateResponse

__all__ = ["ErrorResponse", "GenerateRequest", "GenerateResponse"]
