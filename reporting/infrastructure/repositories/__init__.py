"""Repository implementations for infrastructure layer."""

from .right_repository import RightRepository
from .template_repository import TemplateRepository

__all__ = ["RightRepository", "TemplateRepository"]
