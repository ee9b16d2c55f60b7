from .profile_tool import ErrorTextMiddleware, ProfileLookupTool, ToolOutcome

__all__ = [
    "ErrorTextMiddleware",
    "ProfileLookupTool",
    "ToolOutcome",
]
