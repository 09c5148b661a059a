from fastapi import Request

from world_clock_service.services.context import WorldClockContext


def get_world_clock(request: Request) -> WorldClockContext:
    """The application's clock context, as built by ``create_app``."""
    return request.app.state.world_clock
