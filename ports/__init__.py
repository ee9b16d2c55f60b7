from .profile_api import ProfileApiPort

__all__ = [
    "ProfileApiPort",
]
