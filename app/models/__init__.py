"""
Lobby Chat – SQLAlchemy ORM models package.

Imports all model classes so the metadata and the app can discover them
through a single ``from app.models import *`` import.
"""

from app.models.lobby import Lobby                 # noqa: F401
from app.models.message import Message             # noqa: F401
from app.models.sender import Sender               # noqa: F401
