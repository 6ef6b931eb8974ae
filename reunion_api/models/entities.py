from enum import Enum

from sqlalchemy import Boolean, CheckConstraint, Enum as SqlEnum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reunion_api.models.base import Base


class AgeGroupEnum(str, Enum):
    adult = "ADULT"
    child = "CHILD"
    infant = "INFANT"


age_group_sql_enum = SqlEnum(
    AgeGroupEnum,
    name="agegroupenum",
    values_callable=lambda enum_cls: [item.value for item in enum_cls],
)


class FamilyMember(Base):
    __tablename__ = "family_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age_group: Mapped[AgeGroupEnum] = mapped_column(age_group_sql_enum, nullable=False, default=AgeGroupEnum.adult)
    # Child lists are derived from this back-reference; there is no persisted forward list.
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("family_members.id", ondelete="CASCADE"))
    generation: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_founder: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (CheckConstraint("generation >= 0", name="ck_generation_non_negative"),)


Index("ix_family_members_parent", FamilyMember.parent_id)
Index("ix_family_members_founder", FamilyMember.is_founder)
