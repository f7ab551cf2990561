"""Runtime detection of the operations a resource handler implements.

Handlers cannot be trusted to declare what they support: the base classes
expose every entry point and only fail when called. The prober therefore
calls each entry point with placeholder arguments that should never match a
real record and classifies the outcome:

* ``ResourceDoesNotSupportOperationError`` -> UNSUPPORTED
* success -> IMPLEMENTED
* any other error -> UNKNOWN, which still counts as implemented

The last rule over-reports handlers that fail for unrelated reasons under
placeholder input. Probing executes handler code, so it must only run
against handlers where that is harmless.
"""

from enum import Enum
from typing import Any, Callable, Dict, Tuple

from ..logging import BaseLogger
from ..resource import (
    Capability,
    RequestContext,
    ResourceDescription,
    ResourceDoesNotSupportOperationError,
    SimpleObject,
)

SWAGGER_IMPOSSIBLE_UNIQUE_ID = "SWAGGER_IMPOSSIBLE_UNIQUE_ID"


class CapabilityStatus(str, Enum):
    IMPLEMENTED = "implemented"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


def build_update_probe_body(handler: Any) -> SimpleObject:
    """Body for the update probe: every updatable property mapped to its own name."""
    body = SimpleObject()
    get_updatable = getattr(handler, "get_updatable_properties", None)
    if get_updatable is None:
        return body
    try:
        description = get_updatable()
    except Exception:
        return body
    if isinstance(description, ResourceDescription):
        for name in description.property_names():
            body[name] = name
    return body


_ENTRY_POINTS: Dict[Capability, Tuple[str, Callable[[Any], tuple]]] = {
    Capability.FETCH_ALL: ("get_all", lambda handler: (RequestContext(),)),
    Capability.FETCH_BY_ID: ("get_by_unique_id", lambda handler: (SWAGGER_IMPOSSIBLE_UNIQUE_ID,)),
    Capability.SEARCH: ("search", lambda handler: (RequestContext(),)),
    Capability.CREATE: ("create", lambda handler: (SimpleObject(), RequestContext())),
    Capability.UPDATE: ("update", lambda handler: (
        SWAGGER_IMPOSSIBLE_UNIQUE_ID, build_update_probe_body(handler), RequestContext()
    )),
    Capability.DELETE: ("delete", lambda handler: (SWAGGER_IMPOSSIBLE_UNIQUE_ID, "", RequestContext())),
    Capability.PURGE: ("purge", lambda handler: (SWAGGER_IMPOSSIBLE_UNIQUE_ID, RequestContext())),
}


class CapabilityProber:
    """Determines per handler which capabilities are implemented."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger
        self._results: Dict[Tuple[int, Capability], CapabilityStatus] = {}

    def is_implemented(self, handler: Any, capability: Capability) -> bool:
        return self.probe(handler, capability) != CapabilityStatus.UNSUPPORTED

    def probe(self, handler: Any, capability: Capability) -> CapabilityStatus:
        key = (id(handler), capability)
        if key not in self._results:
            self._results[key] = self._probe(handler, capability)
        return self._results[key]

    def _probe(self, handler: Any, capability: Capability) -> CapabilityStatus:
        handler_name = type(handler).__name__

        declared = self._declared(handler, capability)
        if declared is not None:
            return CapabilityStatus.IMPLEMENTED if declared else CapabilityStatus.UNSUPPORTED

        method_name, build_args = _ENTRY_POINTS[capability]
        method = getattr(handler, method_name, None)
        if not callable(method):
            return CapabilityStatus.UNSUPPORTED

        try:
            method(*build_args(handler))
        except ResourceDoesNotSupportOperationError:
            return CapabilityStatus.UNSUPPORTED
        except Exception as e:
            self.logger.log_debug(
                f"Probe of {handler_name}.{method_name} failed with {type(e).__name__}: {str(e)}; "
                "assuming it is implemented"
            )
            return CapabilityStatus.UNKNOWN

        return CapabilityStatus.IMPLEMENTED

    def _declared(self, handler: Any, capability: Capability):
        declare = getattr(handler, "declared_capability", None)
        if declare is None:
            return None
        try:
            return declare(capability)
        except Exception as e:
            self.logger.log_debug(f"declared_capability failed for {type(handler).__name__}: {str(e)}")
            return None
