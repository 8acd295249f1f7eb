from pydantic import BaseModel, Field


class Principal(BaseModel):
    """Identity attached to a single request; never persisted."""

    id: int = Field(description="Identifier of the authenticated user")
    full_name: str
    email_address: str
    is_role_admin: bool = False
    role_id: int
