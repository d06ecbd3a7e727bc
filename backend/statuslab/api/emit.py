"""Response Emitter — turns a StatusOutcome into a Starlette response.

Invariants:
    - Redirect outcomes → RedirectResponse with the outcome's exact status code
    - Body-less outcomes (204) → empty Response, no content-type
    - 201 outcomes get a Location header pointing at GET /statuscodes/notfound/{id}
    - Every emitted outcome is logged with path, method and status_code

Design Decisions:
    - Emitter is the only place that touches Request for URL building: core/
      stays free of routing knowledge
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from statuslab.core.outcomes import StatusOutcome

logger = logging.getLogger(__name__)

RESOURCE_ROUTE_NAME = "get_resource"


def emit(outcome: StatusOutcome, request: Request) -> Response:
    """Serialize the selected outcome."""
    logger.info(
        f"{request.method} {request.url.path} -> {outcome.status_code}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": outcome.status_code,
        },
    )
    if outcome.is_redirect:
        return RedirectResponse(outcome.location, status_code=outcome.status_code)
    if not outcome.has_body:
        return Response(status_code=outcome.status_code)
    headers = {}
    if outcome.created_id is not None:
        headers["Location"] = str(request.url_for(
            RESOURCE_ROUTE_NAME, resource_id=str(outcome.created_id),
        ))
    return JSONResponse(
        status_code=outcome.status_code, content=outcome.body(), headers=headers,
    )
