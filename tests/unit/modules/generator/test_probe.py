import pytest
from swaggergen.modules.generator.probe import (
    SWAGGER_IMPOSSIBLE_UNIQUE_ID,
    CapabilityProber,
    CapabilityStatus,
    build_update_probe_body,
)
from swaggergen.modules.resource import (
    Capability,
    DelegatingCrudResource,
    ResourceDescription,
    resource,
)


@resource(name="v1/thing")
class RecordingResource(DelegatingCrudResource):
    def __init__(self):
        self.calls = []

    def get_updatable_properties(self):
        return ResourceDescription("name", "description")

    def get_by_unique_id(self, uuid):
        self.calls.append(("get_by_unique_id", uuid))
        return None

    def update(self, uuid, post_body, context):
        self.calls.append(("update", uuid, dict(post_body)))
        return None

    def delete(self, uuid, reason, context):
        raise KeyError(uuid)


class DeclaringResource(DelegatingCrudResource):
    def declared_capability(self, capability):
        if capability == Capability.SEARCH:
            return True
        if capability == Capability.FETCH_BY_ID:
            return False
        return None

    def get_by_unique_id(self, uuid):
        return None


class PlainObject:
    pass


@pytest.fixture
def prober(logger):
    return CapabilityProber(logger)


def test_unsupported_operation_is_not_implemented(prober):
    handler = RecordingResource()
    assert prober.probe(handler, Capability.FETCH_ALL) == CapabilityStatus.UNSUPPORTED
    assert not prober.is_implemented(handler, Capability.CREATE)


def test_successful_call_is_implemented_and_uses_sentinel(prober):
    handler = RecordingResource()
    assert prober.probe(handler, Capability.FETCH_BY_ID) == CapabilityStatus.IMPLEMENTED
    assert handler.calls == [("get_by_unique_id", SWAGGER_IMPOSSIBLE_UNIQUE_ID)]


def test_update_probe_sends_updatable_property_names(prober):
    handler = RecordingResource()
    assert prober.is_implemented(handler, Capability.UPDATE)
    assert handler.calls == [
        ("update", SWAGGER_IMPOSSIBLE_UNIQUE_ID, {"name": "name", "description": "description"})
    ]


def test_unrelated_error_counts_as_implemented(prober, logger):
    handler = RecordingResource()
    assert prober.probe(handler, Capability.DELETE) == CapabilityStatus.UNKNOWN
    assert prober.is_implemented(handler, Capability.DELETE)
    assert any("KeyError" in log for log in logger.get_logs())


def test_results_are_cached(prober):
    handler = RecordingResource()
    prober.is_implemented(handler, Capability.FETCH_BY_ID)
    prober.is_implemented(handler, Capability.FETCH_BY_ID)
    assert len(handler.calls) == 1


def test_declared_capability_wins_over_probing(prober):
    handler = DeclaringResource()
    assert prober.probe(handler, Capability.SEARCH) == CapabilityStatus.IMPLEMENTED
    assert prober.probe(handler, Capability.FETCH_BY_ID) == CapabilityStatus.UNSUPPORTED
    assert prober.probe(handler, Capability.PURGE) == CapabilityStatus.UNSUPPORTED


def test_missing_entry_point_is_unsupported(prober):
    assert prober.probe(PlainObject(), Capability.FETCH_ALL) == CapabilityStatus.UNSUPPORTED


def test_update_probe_body_without_updatable_properties():
    assert build_update_probe_body(PlainObject()) == {}
