"""Load users and mentor profiles from a YAML seed file."""

import logging
from pathlib import Path

import yaml
from sqlalchemy.orm import Session

from peal_mentors.models import MentorProfile, User

logger = logging.getLogger("peal_mentors.storage.seed")

USER_FIELDS = ("id", "name", "avatar_url", "location", "bio", "skills", "interests")
MENTOR_FIELDS = (
    "bio",
    "availability",
    "years_experience",
    "max_mentees",
    "current_mentees_count",
    "accepts_remote",
    "skills",
)


def load_seed_file(db: Session, seed_path: str) -> int:
    """Insert users (and their optional `mentor:` block). Returns the number created.

    Users whose email already exists are skipped.
    """
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    created = 0
    for entry in raw.get("users", []) or []:
        email = (entry.get("email") or "").strip().lower()
        if not email:
            logger.warning("Skipping seed user without email: %s", entry.get("name", "?"))
            continue

        if db.query(User).filter(User.email == email).first():
            logger.info("Seed user %s already exists, skipping", email)
            continue

        user = User(email=email, **{k: entry[k] for k in USER_FIELDS if k in entry})
        db.add(user)
        db.flush()

        mentor_raw = entry.get("mentor")
        if mentor_raw:
            db.add(MentorProfile(
                user_id=user.id,
                **{k: mentor_raw[k] for k in MENTOR_FIELDS if k in mentor_raw},
            ))

        created += 1

    db.commit()
    logger.info("Seeded %d users from %s", created, seed_path)
    return created
