# ruff: noqa: F403, F401
"""Schemas package initialization."""

# Import all schemas to ensure they're registered
from .base import *
from .analytics import *
from .pomodoro import *
from .project import *
from .stats import *
from .task import *
from .user import *
