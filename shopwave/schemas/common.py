"""Shared response schemas and id bounds"""

from pydantic import BaseModel

# Primary keys are 32-bit INTEGER columns
MAX_ID = 2**31 - 1


class SuccessResponse(BaseModel):
    """Plain acknowledgement"""
    success: bool = True
