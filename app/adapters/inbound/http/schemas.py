"""HTTP adapter request and response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.domain.value_objects.role import Role


class CsvUploadRequest(BaseModel):
    """Raw CSV file content."""

    content: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "full_name,email,phone,location\nAna Ruiz,ana@example.com,600111222,Sevilla",
            }
        }
    )


class SessionResponse(BaseModel):
    """Identity and permissions of the caller."""

    user_id: str
    email: Optional[str] = None
    role: Optional[Role] = None
    can_edit: bool
    can_manage_users: bool
