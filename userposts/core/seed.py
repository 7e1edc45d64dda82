# userposts/core/seed.py

import logging
from datetime import date

from sqlalchemy.orm import Session

from userposts.models.post import Post
from userposts.models.user import User

logger = logging.getLogger(__name__)


def seed_database(db: Session) -> bool:
    """Insert the sample users and posts into an empty database.

    Returns False without touching anything when users already exist.
    """
    if db.query(User).first() is not None:
        return False

    today = date.today()
    john = User(id=1001, name="John", birth_date=today)
    jill = User(id=1002, name="Jill", birth_date=today)
    clark = User(id=1003, name="Clark", birth_date=today)
    db.add_all([john, jill, clark])
    db.add_all([
        Post(id=1101, description="My First Post", user=john),
        Post(id=1102, description="My Second Post", user=john),
    ])
    db.commit()
    logger.info("seeded database with 3 users and 2 posts")
    return True
