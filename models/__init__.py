from .profile_reference import ProfileReference, Provider
from .enrichment_request import EnrichmentFlags, EnrichmentRequest
from .person_profile import PersonProfile

__all__ = [
    "ProfileReference",
    "Provider",
    "EnrichmentFlags",
    "EnrichmentRequest",
    "PersonProfile",
]
