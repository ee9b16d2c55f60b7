# Namespace for pipeline steps
from .validate_flags import ValidateFlags  # noqa: F401
from .resolve_reference import ResolveReference  # noqa: F401
from .build_request import BuildEnrichmentRequest  # noqa: F401
from .fetch_profile import FetchProfile  # noqa: F401
from .render_profile import RenderProfile  # noqa: F401
