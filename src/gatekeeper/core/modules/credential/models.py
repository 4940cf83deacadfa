from pydantic import BaseModel, Field


class Credential(BaseModel):
    """A username/password pair together with the principal it unlocks."""

    username: str
    password: str
    role: str
    user_id: str


class Principal(BaseModel):
    """Authenticated identity (API representation)."""

    user_id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    role: str = Field(..., description="Role assigned at login")

    @classmethod
    def from_credential(cls, credential: Credential) -> "Principal":
        return cls(user_id=credential.user_id, username=credential.username, role=credential.role)
