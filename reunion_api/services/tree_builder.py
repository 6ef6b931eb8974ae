from __future__ import annotations

import logging
from collections.abc import Iterable

from reunion_api.models.entities import FamilyMember
from reunion_api.schemas.family_tree import FamilyTreeNode
from reunion_api.services.member_store import is_root

logger = logging.getLogger(__name__)


def to_node(member: FamilyMember) -> FamilyTreeNode:
    return FamilyTreeNode(
        id=member.id,
        name=member.name,
        generation=member.generation,
        age_group=member.age_group,
        parent_id=member.parent_id,
    )


def build_forest(members: Iterable[FamilyMember], root_mode: str) -> tuple[list[FamilyTreeNode], int]:
    """
    Assemble a flat member list into a forest of nodes.

    Children keep the order of ``members``. Members whose parent is not in the
    input cannot be reached from any root and are left out of the forest, but
    still count towards the returned total. A member is only presented as a
    root when it has no parent in the input.
    """
    ordered = list(members)
    nodes = {member.id: to_node(member) for member in ordered}

    orphans = 0
    for member in ordered:
        if member.parent_id is None:
            continue
        parent_node = nodes.get(member.parent_id)
        if parent_node is None:
            orphans += 1
            continue
        parent_node.children.append(nodes[member.id])

    if orphans:
        logger.warning("dropped %d orphaned family member(s) from the tree", orphans)

    # A founder nested under a resolvable parent is presented there only.
    roots = [
        nodes[member.id]
        for member in ordered
        if is_root(member, root_mode) and member.parent_id not in nodes
    ]
    return roots, len(ordered)


def build_subtree(member: FamilyMember, descendants: Iterable[FamilyMember]) -> FamilyTreeNode:
    """Node for ``member`` with its descendants attached underneath."""
    root = to_node(member)
    nodes = {member.id: root}
    for descendant in descendants:
        nodes[descendant.id] = to_node(descendant)
    for node in list(nodes.values()):
        if node is root or node.parent_id is None:
            continue
        parent_node = nodes.get(node.parent_id)
        if parent_node is not None:
            parent_node.children.append(node)
    return root
