from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from reunion_api.models.entities import AgeGroupEnum


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("name is required")
    return value


MemberName = Annotated[str, Field(min_length=1, max_length=255), AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FamilyMemberCreate(CamelModel):
    name: MemberName
    age_group: AgeGroupEnum
    parent_id: int | None = None
    generation: int | None = Field(default=None, ge=0)
    is_founder: bool = False


class FamilyMemberUpdate(CamelModel):
    name: MemberName
    age_group: AgeGroupEnum
    generation: int | None = Field(default=None, ge=0)


class MoveMemberRequest(CamelModel):
    new_parent_id: int | None = None


class FamilyTreeNode(CamelModel):
    id: int
    name: str
    generation: int
    age_group: AgeGroupEnum
    parent_id: int | None = None
    children: list[FamilyTreeNode] = Field(default_factory=list)


class FamilyTreeResponse(CamelModel):
    roots: list[FamilyTreeNode]
    total_members: int
