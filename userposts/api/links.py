from typing import Dict

from fastapi import Request

from userposts.api.schemas.schemas import Link


def link_to(request: Request, route_name: str, rel: str, **path_params) -> Dict[str, Link]:
    """Build a ``{rel: Link}`` entry pointing at a named route of this app."""
    return {rel: Link(href=str(request.url_for(route_name, **path_params)))}


def location_of(request: Request, route_name: str, **path_params) -> str:
    return str(request.url_for(route_name, **path_params))
