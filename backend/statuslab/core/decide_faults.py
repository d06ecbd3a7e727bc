"""Fault Decisions — flag-triggered simulations of server-side failures.

Invariants:
    - 502/503/504 are ordinary outcomes selected by a boolean flag
    - 500 is the only raised fault: SimulatedServerError propagates to the
      application's fault handler, it is never turned into an outcome here
"""

from statuslab.core.domain_types import UpstreamFault
from statuslab.core.errors import SimulatedServerError
from statuslab.core.outcomes import StatusOutcome, respond

# (failure message, success message) per simulated fault
_UPSTREAM_MESSAGES: dict[UpstreamFault, tuple[str, str]] = {
    UpstreamFault.BAD_GATEWAY: (
        "Bad Gateway: Failed to retrieve data from external service.",
        "External service call successful.",
    ),
    UpstreamFault.SERVICE_UNAVAILABLE: (
        "Service Unavailable: System is under maintenance.",
        "Service is available.",
    ),
    UpstreamFault.GATEWAY_TIMEOUT: (
        "Gateway Timeout: External service did not respond in time.",
        "External service responded in time.",
    ),
}


def decide_internal_error(trigger: bool) -> StatusOutcome:
    if trigger:
        raise SimulatedServerError()
    return respond(200, "No error triggered.")


def decide_upstream(fault: UpstreamFault, simulate: bool) -> StatusOutcome:
    failure, success = _UPSTREAM_MESSAGES[fault]
    if simulate:
        return respond(fault.value, failure)
    return respond(200, success)
