from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from reunion_api.core.config import settings
from reunion_api.models.entities import FamilyMember
from reunion_api.schemas.family_tree import FamilyTreeNode, FamilyTreeResponse
from reunion_api.services import member_store
from reunion_api.services.tree_builder import build_forest, build_subtree


def get_tree(db: Session, root_mode: str | None = None) -> FamilyTreeResponse:
    roots, total = build_forest(member_store.list_members(db), root_mode or settings.tree_root_mode)
    return FamilyTreeResponse(roots=roots, total_members=total)


def get_member_node(db: Session, member: FamilyMember) -> FamilyTreeNode:
    descendant_ids = member_store.collect_subtree_ids(db, member.id)[1:]
    descendants = []
    if descendant_ids:
        descendants = db.execute(
            select(FamilyMember).where(FamilyMember.id.in_(descendant_ids)).order_by(FamilyMember.id.asc())
        ).scalars().all()
    return build_subtree(member, descendants)
