"""User Selector — reusable loader options and projection for a user with equipped cosmetics.

Invariants:
    - Only id, username, image and deleted_at are loaded from users
    - Only equipped cosmetics (equipped_at set) are loaded and projected
    - The projection never exposes the UserCosmetic join row, only the cosmetic

Design Decisions:
    - Options are relative to the User entity: callers attach them under their own
      relationship path with `.options(*user_with_cosmetics_select())`
"""

from sqlalchemy.orm import joinedload, load_only, selectinload

from qa_forum.models.user import Cosmetic, User, UserCosmetic


def user_with_cosmetics_select() -> tuple:
    """Loader options for a User row plus its equipped cosmetics."""
    return (
        load_only(User.id, User.username, User.image, User.deleted_at),
        selectinload(
            User.cosmetics.and_(UserCosmetic.equipped_at.is_not(None)),
        ).joinedload(UserCosmetic.cosmetic),
    )


def project_cosmetic(cosmetic: Cosmetic) -> dict:
    return {
        "id": cosmetic.id,
        "name": cosmetic.name,
        "type": cosmetic.type,
        "source": cosmetic.source,
        "data": cosmetic.data,
    }


def project_user_with_cosmetics(user: User) -> dict:
    """User loaded with user_with_cosmetics_select() -> response mapping."""
    return {
        "id": user.id,
        "username": user.username,
        "image": user.image,
        "deleted_at": user.deleted_at,
        "cosmetics": [
            project_cosmetic(owned.cosmetic)
            for owned in user.cosmetics
            if owned.equipped_at is not None
        ],
    }
