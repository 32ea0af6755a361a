#!/usr/bin/env python
"""Operator commands for user accounts.

    python manage_users.py seed
    python manage_users.py delete someone@example.com
    python manage_users.py delete-nameless
"""
import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from taskboard.config import LOG_LEVEL
from taskboard.database import create_tables, get_session
from taskboard.logging_setup import setup_logging
from taskboard.models import Task, User, UserRole
from taskboard.security import get_password_hash

logger = logging.getLogger("taskboard.manage_users")

DEFAULT_USERS = [
    {"email": "admin@test.com", "password": "admin123", "role": UserRole.ADMIN,
     "first_name": "Admin", "last_name": "User"},
    {"email": "commonuser@test.com", "password": "user123", "role": UserRole.USER,
     "first_name": "Common", "last_name": "User"},
]


def upsert_user(db: Session, email: str, password: str, role: UserRole,
                first_name: Optional[str] = None, last_name: Optional[str] = None) -> User:
    """Create the user, or reset password, role and names if it exists."""
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        user = User(email=email, hashed_password="")
        db.add(user)
        logger.info("Creating user %s", email)
    else:
        logger.info("User %s already exists, updating", email)

    user.hashed_password = get_password_hash(password)
    user.role = role
    user.first_name = first_name
    user.last_name = last_name
    db.commit()
    db.refresh(user)
    return user


def seed_default_users(db: Session) -> List[User]:
    return [upsert_user(db, **defaults) for defaults in DEFAULT_USERS]


def _delete_with_tasks(db: Session, user: User) -> int:
    """Delete ``user`` and every task that references it. Returns tasks removed."""
    user_id, email = user.id, user.email
    removed = (
        db.query(Task)
        .filter(or_(
            Task.user_id == user_id,
            Task.created_by_id == user_id,
            Task.assigned_to_id == user_id,
        ))
        .delete(synchronize_session=False)
    )
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s (%s) and %d task(s)", email, user_id, removed)
    return removed


def delete_user(db: Session, email: str) -> bool:
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        logger.info("User %s does not exist", email)
        return False
    _delete_with_tasks(db, user)
    return True


def delete_users_without_names(db: Session) -> List[str]:
    """Delete every user missing a first or last name. Returns their emails."""
    users = (
        db.query(User)
        .filter(or_(User.first_name.is_(None), User.last_name.is_(None)))
        .all()
    )
    if not users:
        logger.info("No users found without names")
        return []

    deleted = []
    for user in users:
        email = user.email
        _delete_with_tasks(db, user)
        deleted.append(email)
    return deleted


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Manage Taskboard user accounts")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("seed", help="create or reset the default admin and common users")
    delete = sub.add_parser("delete", help="delete a user and their tasks")
    delete.add_argument("email")
    sub.add_parser("delete-nameless", help="delete users without a first or last name")
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)
    create_tables()

    with get_session() as db:
        if args.command == "seed":
            for user in seed_default_users(db):
                print(f"{user.role.value:<5} {user.email}")
        elif args.command == "delete":
            if not delete_user(db, args.email):
                return 1
        elif args.command == "delete-nameless":
            for email in delete_users_without_names(db):
                print(f"deleted {email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
