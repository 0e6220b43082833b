from .parsed_name import ParsedName
from .event_info import EventInfo
from .profile_record import NOT_FOUND, ProfileRecord
from .enrichlayer import CreditBalance, DateParts, Experience, PersonProfile, SearchHit, SearchResponse

__all__ = [
    "ParsedName",
    "EventInfo",
    "ProfileRecord",
    "NOT_FOUND",
    "CreditBalance",
    "DateParts",
    "Experience",
    "PersonProfile",
    "SearchHit",
    "SearchResponse",
]
