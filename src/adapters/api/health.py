"""Liveness probe for load balancers and orchestrators."""

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get("/health_check", response_class=Response, summary="Liveness probe")
async def health_check() -> Response:
    """Return an empty 200 response while the process is serving requests."""
    return Response(status_code=status.HTTP_200_OK)
