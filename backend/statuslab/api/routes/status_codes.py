"""Status Code Endpoints — one route per demonstrated status code.

Invariants:
    - Every route delegates its predicate to exactly one core decide_* function
    - Query/path/form/body binding is done by FastAPI; binding failures → 400
    - Integer parameters are 32-bit; out-of-range values are binding failures
    - Authorization and Accept are read as all values joined with ','
    - No state survives a request: repeating a GET yields the same response

Design Decisions:
    - validate-content reads its body by hand: the Content-Type check (415)
      must run before any JSON parsing, which declared body params would do first
    - Route paths keep the public casing (notHereAnymore, willRedirectToTarget)
"""

from fastapi import APIRouter, Form, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from statuslab.api.docs import status_responses
from statuslab.api.emit import RESOURCE_ROUTE_NAME, emit
from statuslab.api.routes.request_helpers import joined_header, read_resource_request
from statuslab.config import get_settings
from statuslab.core.decide_faults import decide_internal_error, decide_upstream
from statuslab.core.decide_headers import (
    decide_authorization_present,
    decide_negotiation,
    decide_token,
    decide_validated_content,
    is_json_media_type,
)
from statuslab.core.decide_queries import decide_query_value, decide_rate
from statuslab.core.decide_redirects import decide_redirect
from statuslab.core.decide_resources import (
    decide_conflict,
    decide_create,
    decide_delete,
    decide_lookup,
    decide_ok,
    decide_unprocessable,
)
from statuslab.core.domain_types import INT32_MAX, INT32_MIN, RedirectKind, UpstreamFault
from statuslab.schemas.resource import ResourceRequest

router = APIRouter(
    prefix="/statuscodes", tags=["statuscodes"], default_response_class=JSONResponse,
)


# ─── 2xx ─────────────────────────────────────────────────────────

@router.get("/ok", responses=status_responses(200))
async def get_ok(request: Request):
    """200 OK with a fixed message."""
    return emit(decide_ok(), request)


@router.post(
    "/create", status_code=status.HTTP_201_CREATED,
    responses=status_responses(201, 400),
)
async def create_resource(
    request: Request,
    resource_id: int = Query(0, alias="id", ge=INT32_MIN, le=INT32_MAX),
    name: str | None = Form(None),
):
    """201 Created echoing the form's name, 400 without one."""
    return emit(decide_create(name, resource_id), request)


@router.delete(
    "/delete/{resource_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=status_responses(204),
)
async def delete_resource(
    request: Request, resource_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
):
    """204 No Content for any id."""
    return emit(decide_delete(resource_id), request)


# ─── 4xx ─────────────────────────────────────────────────────────

@router.get("/badrequest", responses=status_responses(200, 400))
async def get_bad_request(request: Request, value: str | None = Query(None)):
    """400 when 'value' is missing or not an integer."""
    return emit(decide_query_value(value), request)


@router.get("/unauthorized", responses=status_responses(200, 401))
async def get_unauthorized(request: Request):
    """401 when the Authorization header is missing."""
    authorization = joined_header(request, "authorization")
    return emit(decide_authorization_present(authorization), request)


@router.get("/forbidden", responses=status_responses(200, 401, 403))
async def get_forbidden(request: Request):
    """401 without a header, 403 unless it is exactly 'Bearer VALID_TOKEN'."""
    authorization = joined_header(request, "authorization")
    return emit(decide_token(authorization), request)


@router.get(
    "/notfound/{resource_id}", name=RESOURCE_ROUTE_NAME,
    responses=status_responses(200, 404),
)
async def get_resource(
    request: Request, resource_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
):
    """Only resource 1 exists."""
    return emit(decide_lookup(resource_id), request)


@router.post(
    "/conflict", status_code=status.HTTP_201_CREATED,
    responses=status_responses(201, 409),
)
async def create_duplicate_resource(body: ResourceRequest, request: Request):
    """409 when the name is 'Duplicate' (any case)."""
    return emit(decide_conflict(body.name), request)


@router.post(
    "/unprocessable", status_code=status.HTTP_201_CREATED,
    responses=status_responses(201, 422),
)
async def create_resource_unprocessable(body: ResourceRequest, request: Request):
    """422 when the name is missing or shorter than 3 characters."""
    return emit(decide_unprocessable(body.name), request)


@router.get("/toomany", responses=status_responses(200, 429))
async def get_too_many_requests(
    request: Request, requests: int = Query(0, ge=INT32_MIN, le=INT32_MAX),
):
    """429 once 'requests' exceeds the limit of 5."""
    return emit(decide_rate(requests), request)


@router.get("/negotiate", responses=status_responses(200, 406))
async def negotiate_content(request: Request):
    """406 unless Accept mentions application/json."""
    return emit(decide_negotiation(joined_header(request, "accept")), request)


@router.post(
    "/validate-content", status_code=status.HTTP_201_CREATED,
    responses=status_responses(201, 400, 415),
)
async def validate_content_type(request: Request):
    """415 unless Content-Type is exactly application/json, then 400 without a name."""
    content_type = request.headers.get("content-type")
    name = None
    if is_json_media_type(content_type):
        name = (await read_resource_request(request)).name
    return emit(decide_validated_content(content_type, name), request)


# ─── 5xx ─────────────────────────────────────────────────────────

@router.get("/internalerror", responses=status_responses(200, 500))
async def get_internal_error(request: Request, trigger: bool = Query(False)):
    """Raises when triggered; the global fault handler answers 500."""
    return emit(decide_internal_error(trigger), request)


@router.get("/badgateway", responses=status_responses(200, 502))
async def get_bad_gateway(request: Request, simulate: bool = Query(False)):
    return emit(decide_upstream(UpstreamFault.BAD_GATEWAY, simulate), request)


@router.get("/serviceunavailable", responses=status_responses(200, 503))
async def get_service_unavailable(
    request: Request, maintenance: bool = Query(False),
):
    return emit(
        decide_upstream(UpstreamFault.SERVICE_UNAVAILABLE, maintenance), request,
    )


@router.get("/gatewaytimeout", responses=status_responses(200, 504))
async def get_gateway_timeout(request: Request, timeout: bool = Query(False)):
    return emit(decide_upstream(UpstreamFault.GATEWAY_TIMEOUT, timeout), request)


# ─── 3xx ─────────────────────────────────────────────────────────

@router.get(
    "/notHereAnymore", status_code=status.HTTP_301_MOVED_PERMANENTLY,
    responses=status_responses(301),
)
async def get_redirect_301(request: Request):
    """301 to the configured fixed location."""
    location = get_settings().redirect_location
    return emit(decide_redirect(RedirectKind.MOVED_PERMANENTLY, location), request)


@router.get(
    "/willRedirectToTarget", status_code=status.HTTP_308_PERMANENT_REDIRECT,
    responses=status_responses(308),
)
async def get_redirect_308(request: Request):
    """308 to the configured fixed location, method preserved."""
    location = get_settings().redirect_location
    return emit(decide_redirect(RedirectKind.PERMANENT_REDIRECT, location), request)
