from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from reunion_api.models.entities import AgeGroupEnum, FamilyMember
from reunion_api.services import member_store

logger = logging.getLogger(__name__)


class HierarchyError(Exception):
    pass


class MemberNotFoundError(HierarchyError):
    def __init__(self, member_id: int):
        super().__init__(f"family member not found with id: {member_id}")
        self.member_id = member_id


class CycleError(HierarchyError):
    def __init__(self, member_id: int, new_parent_id: int):
        super().__init__(f"cannot move family member {member_id} under its own descendant {new_parent_id}")
        self.member_id = member_id
        self.new_parent_id = new_parent_id


def require_member(db: Session, member_id: int) -> FamilyMember:
    member = member_store.get_member(db, member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


def _is_ancestor_or_self(db: Session, candidate_id: int, member_id: int) -> bool:
    """True when ``candidate_id`` is ``member_id`` or one of its ancestors."""
    seen: set[int] = set()
    current: int | None = member_id
    while current is not None and current not in seen:
        if current == candidate_id:
            return True
        seen.add(current)
        current = db.execute(select(FamilyMember.parent_id).where(FamilyMember.id == current)).scalar_one_or_none()
    return False


def add_member(
    db: Session,
    name: str,
    age_group: AgeGroupEnum,
    parent_id: int | None = None,
    generation: int | None = None,
    is_founder: bool = False,
) -> FamilyMember:
    parent = require_member(db, parent_id) if parent_id is not None else None

    if generation is None:
        generation = parent.generation + 1 if parent is not None else 0

    member = member_store.save_member(
        db,
        FamilyMember(
            name=name,
            age_group=age_group,
            parent_id=parent.id if parent is not None else None,
            generation=generation,
            is_founder=is_founder,
        ),
    )
    logger.info("added family member %s (parent=%s, generation=%s)", member.id, member.parent_id, member.generation)
    return member


def update_member(
    db: Session,
    member_id: int,
    name: str,
    age_group: AgeGroupEnum,
    generation: int | None = None,
) -> FamilyMember:
    member = require_member(db, member_id)
    member.name = name
    member.age_group = age_group
    # Generation is only ever recomputed by a move.
    if generation is not None:
        member.generation = generation
    db.flush()
    logger.info("updated family member %s", member.id)
    return member


def move_member(db: Session, member_id: int, new_parent_id: int | None = None) -> FamilyMember:
    member = require_member(db, member_id)
    new_parent = require_member(db, new_parent_id) if new_parent_id is not None else None

    if new_parent is not None and _is_ancestor_or_self(db, member.id, new_parent.id):
        logger.warning("rejected move of family member %s under %s: would create a cycle", member.id, new_parent.id)
        raise CycleError(member.id, new_parent.id)

    member.parent_id = new_parent.id if new_parent is not None else None
    member.generation = new_parent.generation + 1 if new_parent is not None else 0
    db.flush()

    rewritten = 0
    stack = [member]
    while stack:
        current = stack.pop()
        for child in member_store.list_children(db, current.id):
            child.generation = current.generation + 1
            rewritten += 1
            stack.append(child)
    db.flush()

    logger.info(
        "moved family member %s under %s (generation=%s, descendants updated=%d)",
        member.id,
        member.parent_id,
        member.generation,
        rewritten,
    )
    return member


def delete_member(db: Session, member_id: int) -> int:
    member = require_member(db, member_id)
    removed = member_store.delete_member(db, member)
    logger.info("deleted family member %s and %d descendant(s)", member_id, removed - 1)
    return removed
