"""Pattern library endpoint."""

from fastapi import APIRouter

from server.models import PatternsResponse
from wireframe2svg.patterns import load_pattern_library

router = APIRouter(prefix="/api")


@router.get("/patterns")
async def api_patterns() -> PatternsResponse:
    """Return the snippet library; an empty library with an error message when it cannot be loaded."""
    library, error = await load_pattern_library()
    return PatternsResponse(library=library, error=error)
