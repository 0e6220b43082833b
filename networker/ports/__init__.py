from .cache_store import CacheFault, CacheRead, ProfileStorePort
from .llm import LLMClientPort, SummaryCondenserPort
from .profile_api import ProfileApiError, ProfileApiPort

__all__ = [
    "CacheFault",
    "CacheRead",
    "ProfileStorePort",
    "LLMClientPort",
    "SummaryCondenserPort",
    "ProfileApiError",
    "ProfileApiPort",
]
