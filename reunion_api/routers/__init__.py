from reunion_api.routers import family_tree, health

__all__ = [
    "health",
    "family_tree",
]
