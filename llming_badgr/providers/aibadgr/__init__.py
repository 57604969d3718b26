"""AI Badgr provider package."""
from .aibadgr_models import AIBADGR_MODELS, AIBADGR_PROFILES, get_profile
from .aibadgr_client import ChatAIBadgr, sanitize_request

# Note: Provider is imported directly to avoid circular imports
__all__ = ['AIBADGR_MODELS', 'AIBADGR_PROFILES', 'get_profile', 'ChatAIBadgr', 'sanitize_request']
