from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from reunion_api.core.db import get_db
from reunion_api.schemas.family_tree import (
    FamilyMemberCreate,
    FamilyMemberUpdate,
    FamilyTreeNode,
    FamilyTreeResponse,
    MoveMemberRequest,
)
from reunion_api.services import hierarchy
from reunion_api.services.hierarchy import CycleError, MemberNotFoundError
from reunion_api.services.tree_query import get_member_node, get_tree

router = APIRouter(prefix="/v1/family-tree", tags=["family-tree"])


def _translate(db: Session, exc: Exception) -> HTTPException:
    db.rollback()
    if isinstance(exc, MemberNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=409, detail=str(exc))


@router.get("", response_model=FamilyTreeResponse)
def get_family_tree(db: Session = Depends(get_db)):
    return get_tree(db)


@router.post("/members", response_model=FamilyTreeNode, status_code=201)
def add_member(payload: FamilyMemberCreate, db: Session = Depends(get_db)):
    try:
        member = hierarchy.add_member(
            db,
            name=payload.name,
            age_group=payload.age_group,
            parent_id=payload.parent_id,
            generation=payload.generation,
            is_founder=payload.is_founder,
        )
    except MemberNotFoundError as exc:
        raise _translate(db, exc) from None
    db.commit()
    db.refresh(member)
    return get_member_node(db, member)


@router.put("/members/{member_id}", response_model=FamilyTreeNode)
def update_member(member_id: int, payload: FamilyMemberUpdate, db: Session = Depends(get_db)):
    try:
        member = hierarchy.update_member(
            db,
            member_id,
            name=payload.name,
            age_group=payload.age_group,
            generation=payload.generation,
        )
    except MemberNotFoundError as exc:
        raise _translate(db, exc) from None
    db.commit()
    db.refresh(member)
    return get_member_node(db, member)


@router.patch(
    "/members/{member_id}/move",
    response_model=FamilyTreeNode,
    description=(
        "Reparent a member and recompute the generations of its subtree. "
        "Omitting newParentId detaches the member; with the default founders root mode "
        "a detached non-founder and its subtree still count in totalMembers but are no "
        "longer listed under roots."
    ),
)
def move_member(member_id: int, payload: MoveMemberRequest, db: Session = Depends(get_db)):
    try:
        member = hierarchy.move_member(db, member_id, payload.new_parent_id)
    except (MemberNotFoundError, CycleError) as exc:
        raise _translate(db, exc) from None
    db.commit()
    db.refresh(member)
    return get_member_node(db, member)


@router.delete("/members/{member_id}", status_code=204)
def delete_member(member_id: int, db: Session = Depends(get_db)):
    try:
        hierarchy.delete_member(db, member_id)
    except MemberNotFoundError as exc:
        raise _translate(db, exc) from None
    db.commit()
