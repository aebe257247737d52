"""
User Service

Identity resolution and profile persistence.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from nutrilog.extensions import db
from nutrilog.models.user import User
from nutrilog.utils.auth import Identity
from nutrilog.utils.errors import NotFoundError

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("age", "weight", "height", "gender")


def find_user(email: str) -> Optional[User]:
    return User.query.filter_by(email=email).first()


def ensure_user(identity: Identity) -> User:
    """
    Return the user row for an identity, creating it on first sight.

    Idempotent: an existing row is returned untouched apart from filling
    an empty name or image from the identity.
    """
    user = find_user(identity.email)
    if user:
        changed = False
        if not user.name and identity.name:
            user.name = identity.name
            changed = True
        if not user.image and identity.image:
            user.image = identity.image
            changed = True
        if changed:
            db.session.commit()
        return user

    user = User(email=identity.email, name=identity.name or "", image=identity.image or "")
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Another request created the same identity first
        db.session.rollback()
        user = find_user(identity.email)
        if user is None:
            raise
        return user

    logger.info("Created user %s for %s", user.id, identity.email)
    return user


def get_profile(email: str) -> Dict[str, Any]:
    user = find_user(email)
    if not user:
        raise NotFoundError("User not found")
    return user.to_dict()


def update_profile(identity: Identity, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge validated profile fields into the user's row.

    Fields not present in `fields` keep their stored value.
    """
    user = ensure_user(identity)
    for key in PROFILE_FIELDS:
        if key in fields and fields[key] is not None:
            setattr(user, key, fields[key])
    db.session.commit()
    return user.to_dict()
