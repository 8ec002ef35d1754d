"""Global match engine instance to avoid circular imports."""

from .core.engine import MatchEngine
from .config import get_settings

# Global match engine instance
settings = get_settings()
match_engine = MatchEngine(
    default_match_type=settings.default_algorithm,
    case_mode=settings.case_mode,
    forward=settings.forward,
    reset_on_match=settings.reset_boundary_on_match,
)
