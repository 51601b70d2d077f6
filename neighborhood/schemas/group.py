"""Group Schemas - create/update bodies for community groups."""

from pydantic import Field, field_validator

from neighborhood.core.domain_types import GroupType
from neighborhood.schemas.user import CamelModel


class GroupCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    type: GroupType

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class GroupUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    type: GroupType | None = None
