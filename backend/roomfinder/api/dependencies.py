"""Route Dependencies: hand the composition-root singletons to route handlers."""

from fastapi import Request

from roomfinder.services.room_service import RoomService


def get_room_service(request: Request) -> RoomService:
    """FastAPI dependency returning the RoomService built in the lifespan."""
    service = getattr(request.app.state, "room_service", None)
    if service is None:
        raise RuntimeError("Room service not initialized")
    return service
