"""
Models package initialization
"""

from .user import User
from .tuit import Tuit
from .follow import Follow
from .like import Like

__all__ = ["User", "Tuit", "Follow", "Like"]
