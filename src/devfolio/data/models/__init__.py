"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User / AuthSession: admin accounts and their issued sessions
- Profile: the portfolio owner's public details
- Experience / Education: work and education history
- Skill: skills grouped by category with a proficiency level
- ContactMessage: messages submitted through the public contact form

All models inherit from the shared Base declarative class defined in data.db.
"""

from devfolio.data.db import Base
from devfolio.data.models.contact_message import ContactMessage
from devfolio.data.models.education import Education
from devfolio.data.models.experience import Experience
from devfolio.data.models.profile import Profile
from devfolio.data.models.skill import Skill
from devfolio.data.models.user import AuthSession, User

__all__ = [
    "AuthSession",
    "Base",
    "ContactMessage",
    "Education",
    "Experience",
    "Profile",
    "Skill",
    "User",
]
