from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reunion_api.models.entities import AgeGroupEnum, FamilyMember
from reunion_api.services import member_store

logger = logging.getLogger(__name__)

FOUNDERS = ("Wesley Tumblin", "Esther Tumblin")

# Branch head (child of the first founder) -> {child: [grandchildren]}
BRANCHES: dict[str, dict[str, list[str]]] = {
    "Gail Tumblin": {
        "Alan": ["Aeson", "Anasiya"],
        "Alana": ["Azael", "Alfie"],
        "Kristy": ["Kalah", "Darinam"],
        "Candace": ["Oren", "Chad", "Austin"],
    },
    "Wesley Tumblin II": {
        "Wesley III": ["Kierra"],
        "Thomas": ["Deontia", "Jalanrique"],
        "Justin": ["Duri", "Brooklyn"],
        "Jessica": ["Paloma"],
    },
    "Michael Tumblin": {
        "Michelle": ["Niorielle", "Milewisee", "Ely"],
    },
    "Cheryl Tumblin": {
        "Kendrick": [],
        "Derrick": ["Ariel", "Malachi", "Isaiah"],
        "Kiera": ["Christian", "Tyler", "Leeah"],
    },
    "Myra Tumblin": {
        "Daillyn": ["Jasir", "Jazmyn"],
        "Angelisha": ["Aiden", "Amartrez"],
    },
}


def seed_demo_family(db: Session) -> int:
    """
    Populate an empty member table with the demo reunion family.

    Returns the number of members created; an already populated table is left
    untouched and 0 is returned.
    """
    if member_store.count_members(db) > 0:
        return 0

    created = 0

    def _save(name: str, age_group: AgeGroupEnum, parent: FamilyMember | None, is_founder: bool = False) -> FamilyMember:
        nonlocal created
        created += 1
        return member_store.save_member(
            db,
            FamilyMember(
                name=name,
                age_group=age_group,
                parent_id=parent.id if parent is not None else None,
                generation=parent.generation + 1 if parent is not None else 0,
                is_founder=is_founder,
            ),
        )

    founders = [_save(name, AgeGroupEnum.adult, None, is_founder=True) for name in FOUNDERS]
    for head_name, children in BRANCHES.items():
        head = _save(head_name, AgeGroupEnum.adult, founders[0])
        for child_name, grandchildren in children.items():
            child = _save(child_name, AgeGroupEnum.adult, head)
            for grandchild_name in grandchildren:
                _save(grandchild_name, AgeGroupEnum.child, child)

    logger.info("seeded demo family with %d members", created)
    return created
