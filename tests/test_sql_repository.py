"""
Unit tests for the SQLAlchemy-backed repositories.
"""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from userposts.core.seed import seed_database
from userposts.models.post import Post
from userposts.models.user import User
from userposts.storage.sql import PostRepository, UserRepository


class TestUserRepository:
    """Tests for UserRepository."""

    def test_find_all_empty(self, db):
        assert UserRepository(db).find_all() == []

    def test_save_generates_id(self, db):
        users = UserRepository(db)
        saved = users.save(User(name="Al", birth_date=date(2000, 1, 1)))

        assert saved.id is not None
        assert users.find_by_id(saved.id).name == "Al"

    def test_save_with_existing_id_updates(self, db):
        users = UserRepository(db)
        original = users.save(User(name="Al", birth_date=date(2000, 1, 1)))

        users.save(User(id=original.id, name="Alan", birth_date=date(1999, 2, 2)))

        assert len(users.find_all()) == 1
        assert users.find_by_id(original.id).name == "Alan"

    def test_save_with_new_explicit_id_inserts(self, db):
        users = UserRepository(db)
        saved = users.save(User(id=77, name="Seventy", birth_date=date(2000, 1, 1)))
        assert saved.id == 77
        assert users.find_by_id(77) is not None

    def test_find_by_id_missing(self, db):
        assert UserRepository(db).find_by_id(5) is None

    def test_delete_by_id(self, db):
        users = UserRepository(db)
        saved = users.save(User(name="Al", birth_date=date(2000, 1, 1)))

        assert users.delete_by_id(saved.id) is None
        assert users.find_by_id(saved.id) is None

    def test_delete_by_id_missing_is_idempotent(self, db):
        users = UserRepository(db)
        users.delete_by_id(123)
        users.delete_by_id(123)
        assert users.find_all() == []

    def test_delete_user_owning_posts_fails(self, db):
        """Foreign keys are enforced, so owned posts are never orphaned."""
        seed_database(db)
        users = UserRepository(db)

        with pytest.raises(IntegrityError):
            users.delete_by_id(1001)
        db.rollback()

        assert users.find_by_id(1001) is not None
        assert all(post.user_id == 1001 for post in PostRepository(db).find_all())


class TestPostRepository:
    """Tests for PostRepository."""

    def test_save_post_for_user(self, db):
        user = UserRepository(db).save(User(name="Al", birth_date=date(2000, 1, 1)))
        post = PostRepository(db).save(Post(description="first", user=user))

        assert post.id is not None
        assert post.user_id == user.id
        assert [p.description for p in user.posts] == ["first"]


class TestSeedDatabase:
    """Tests for the sample data loader."""

    def test_seed_inserts_sample_rows(self, db):
        assert seed_database(db) is True

        users = UserRepository(db).find_all()
        assert sorted(u.id for u in users) == [1001, 1002, 1003]
        john = UserRepository(db).find_by_id(1001)
        assert sorted(p.description for p in john.posts) == ["My First Post", "My Second Post"]

    def test_seed_skips_populated_database(self, db):
        seed_database(db)
        assert seed_database(db) is False
        assert len(UserRepository(db).find_all()) == 3
