"""Business logic services."""

from dreamweaver.services.credential_service import CredentialService, validate_api_key
from dreamweaver.services.story_service import StoryService

__all__ = ["CredentialService", "StoryService", "validate_api_key"]
