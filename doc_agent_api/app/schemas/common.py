"""
Response envelopes shared by several endpoints.
"""

from pydantic import BaseModel

from doc_agent_api.core.errors import ErrorResponse

__all__ = ["ErrorResponse", "MessageResponse"]


class MessageResponse(BaseModel):
    message: str
