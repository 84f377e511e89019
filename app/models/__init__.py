from .base import Base
from .user import User
from .job_application import JobApplication

__all__ = ["Base", "User", "JobApplication"]
