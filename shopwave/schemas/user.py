"""Session identity schemas"""

from pydantic import BaseModel
from typing import Optional


class CurrentUserResponse(BaseModel):
    """Identity carried by the session token"""
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
