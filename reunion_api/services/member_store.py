from __future__ import annotations

from collections import deque

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from reunion_api.models.entities import FamilyMember

ROOT_MODE_FOUNDERS = "founders"
ROOT_MODE_PARENTLESS = "parentless"
ROOT_MODES = (ROOT_MODE_FOUNDERS, ROOT_MODE_PARENTLESS)


def is_root(member: FamilyMember, root_mode: str) -> bool:
    if root_mode == ROOT_MODE_FOUNDERS:
        return bool(member.is_founder)
    if root_mode == ROOT_MODE_PARENTLESS:
        return member.parent_id is None
    raise ValueError(f"unknown tree root mode: {root_mode}")


def get_member(db: Session, member_id: int) -> FamilyMember | None:
    return db.get(FamilyMember, member_id)


def save_member(db: Session, member: FamilyMember) -> FamilyMember:
    db.add(member)
    db.flush()
    return member


def list_members(db: Session) -> list[FamilyMember]:
    return list(db.execute(select(FamilyMember).order_by(FamilyMember.id.asc())).scalars().all())


def count_members(db: Session) -> int:
    return db.execute(select(func.count()).select_from(FamilyMember)).scalar_one()


def list_children(db: Session, parent_id: int) -> list[FamilyMember]:
    return list(
        db.execute(
            select(FamilyMember).where(FamilyMember.parent_id == parent_id).order_by(FamilyMember.id.asc())
        ).scalars().all()
    )


def find_roots(db: Session, root_mode: str) -> list[FamilyMember]:
    query = select(FamilyMember)
    if root_mode == ROOT_MODE_FOUNDERS:
        query = query.where(FamilyMember.is_founder.is_(True))
    elif root_mode == ROOT_MODE_PARENTLESS:
        query = query.where(FamilyMember.parent_id.is_(None))
    else:
        raise ValueError(f"unknown tree root mode: {root_mode}")
    return list(db.execute(query.order_by(FamilyMember.id.asc())).scalars().all())


def collect_subtree_ids(db: Session, member_id: int) -> list[int]:
    """Return ``member_id`` followed by all transitive descendants, breadth-first."""
    collected = [member_id]
    seen = {member_id}
    frontier = deque([member_id])
    while frontier:
        current = frontier.popleft()
        child_ids = db.execute(
            select(FamilyMember.id).where(FamilyMember.parent_id == current).order_by(FamilyMember.id.asc())
        ).scalars().all()
        for child_id in child_ids:
            if child_id in seen:
                continue
            seen.add(child_id)
            collected.append(child_id)
            frontier.append(child_id)
    return collected


def delete_member(db: Session, member: FamilyMember) -> int:
    """
    Delete a member together with its whole subtree.

    Descendants are collected and removed explicitly rather than relying on the
    database honouring ON DELETE CASCADE (SQLite ignores it unless foreign keys
    are switched on).
    """
    subtree_ids = collect_subtree_ids(db, member.id)
    db.execute(delete(FamilyMember).where(FamilyMember.id.in_(subtree_ids)))
    return len(subtree_ids)
