import uuid

import pytest

from app.core.exceptions import NotFoundError, UnitOccupiedError
from app.services.occupancy_service import OccupancyCoordinator


@pytest.fixture()
def coordinator(db):
    return OccupancyCoordinator(db)


def test_assign_sets_occupant(coordinator, property_p1):
    tenant_id = uuid.uuid4()
    unit = coordinator.assign(tenant_id, property_p1.id, "U1")
    assert unit.tenant_id == tenant_id
    assert coordinator.occupant_of(property_p1.id, "U1") == tenant_id


def test_assign_twice_is_idempotent(coordinator, property_p1):
    tenant_id = uuid.uuid4()
    coordinator.assign(tenant_id, property_p1.id, "U1")
    unit = coordinator.assign(tenant_id, property_p1.id, "U1")
    assert unit.tenant_id == tenant_id


def test_assign_accepts_string_ids(coordinator, property_p1):
    tenant_id = uuid.uuid4()
    coordinator.assign(str(tenant_id), str(property_p1.id), "U1")
    assert coordinator.occupant_of(property_p1.id, "U1") == tenant_id


def test_assign_to_unit_held_by_other_tenant_is_rejected(coordinator, property_p1):
    first, second = uuid.uuid4(), uuid.uuid4()
    coordinator.assign(first, property_p1.id, "U1")

    with pytest.raises(UnitOccupiedError) as exc_info:
        coordinator.assign(second, property_p1.id, "U1")

    assert exc_info.value.occupant_id == first
    assert coordinator.occupant_of(property_p1.id, "U1") == first


def test_assign_unknown_unit_or_property(coordinator, property_p1):
    with pytest.raises(NotFoundError):
        coordinator.assign(uuid.uuid4(), property_p1.id, "NOPE")
    with pytest.raises(NotFoundError):
        coordinator.assign(uuid.uuid4(), uuid.uuid4(), "U1")


def test_release_vacates_unit(coordinator, property_p1):
    tenant_id = uuid.uuid4()
    coordinator.assign(tenant_id, property_p1.id, "U1")
    assert coordinator.release(tenant_id, property_p1.id, "U1") is True
    assert coordinator.occupant_of(property_p1.id, "U1") is None


def test_release_on_vacant_unit_is_noop(coordinator, property_p1):
    assert coordinator.release(uuid.uuid4(), property_p1.id, "U1") is False
    assert coordinator.occupant_of(property_p1.id, "U1") is None


def test_release_by_non_occupant_leaves_unit_alone(coordinator, property_p1):
    holder = uuid.uuid4()
    coordinator.assign(holder, property_p1.id, "U1")
    assert coordinator.release(uuid.uuid4(), property_p1.id, "U1") is False
    assert coordinator.occupant_of(property_p1.id, "U1") == holder


def test_release_missing_unit_is_noop(coordinator, property_p1):
    assert coordinator.release(uuid.uuid4(), uuid.uuid4(), "U1") is False


def test_move_between_units(coordinator, property_p1):
    tenant_id = uuid.uuid4()
    coordinator.assign(tenant_id, property_p1.id, "U1")
    coordinator.move(tenant_id, property_p1.id, "U1", property_p1.id, "U2")

    assert coordinator.occupant_of(property_p1.id, "U1") is None
    assert coordinator.occupant_of(property_p1.id, "U2") == tenant_id


def test_rejected_move_keeps_old_assignment(coordinator, property_p1):
    mover, holder = uuid.uuid4(), uuid.uuid4()
    coordinator.assign(mover, property_p1.id, "U1")
    coordinator.assign(holder, property_p1.id, "U2")

    with pytest.raises(UnitOccupiedError):
        coordinator.move(mover, property_p1.id, "U1", property_p1.id, "U2")

    assert coordinator.occupant_of(property_p1.id, "U1") == mover
    assert coordinator.occupant_of(property_p1.id, "U2") == holder


def test_move_to_missing_unit_keeps_old_assignment(coordinator, property_p1):
    mover = uuid.uuid4()
    coordinator.assign(mover, property_p1.id, "U1")

    with pytest.raises(NotFoundError):
        coordinator.move(mover, property_p1.id, "U1", property_p1.id, "U9")

    assert coordinator.occupant_of(property_p1.id, "U1") == mover
