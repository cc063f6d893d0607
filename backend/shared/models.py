"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from the user row joined to a valid session
    and made available to route handlers via dependency injection.

    It never carries the password hash.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    full_name: Optional[str] = Field(None, description="Display name")
    subscription_type: Optional[str] = Field(None, description="Subscription tier")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra columns from the users table
    }
