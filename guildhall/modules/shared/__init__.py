"""Shared service-layer building blocks."""

from guildhall.modules.shared.base_service import BaseService

__all__ = ["BaseService"]
