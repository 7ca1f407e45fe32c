"""
Tests del store en memoria y sus repositorios.
"""

from typing import get_args

import pytest
from pydantic import ValidationError

from inmoflow.database import LeadRepository, PropertyRepository, VisitRepository
from inmoflow.database.repositories import PROPERTY_TRANSITIONS
from inmoflow.exceptions import InvalidTransitionError, NotFoundError
from inmoflow.models.property import PropertyStatus


@pytest.fixture
def properties(store):
    return PropertyRepository(store)


@pytest.fixture
def leads(store):
    return LeadRepository(store)


@pytest.mark.unit
class TestPropertyRepository:
    """CRUD y ciclo de vida de propiedades."""

    def test_get(self, properties):
        assert properties.get("prop-1").ref == "MAD-001"

    def test_get_missing(self, properties):
        with pytest.raises(NotFoundError) as exc_info:
            properties.get("nope")

        assert exc_info.value.entity == "Property"
        assert exc_info.value.entity_id == "nope"
        assert "Property not found" in str(exc_info.value)

    def test_list_active(self, properties):
        assert {p.id for p in properties.list_active()} == {"prop-1", "prop-2", "prop-3"}

    def test_create_assigns_id_and_timestamps(self, properties):
        prop = properties.create(
            {
                "ref": "VAL-001",
                "price": 200000,
                "type": "house",
                "address": {"city": "Valencia"},
            }
        )

        assert prop.id
        assert prop.status == "draft"
        assert prop.property_type == "house"
        assert prop.created_at == prop.updated_at
        assert properties.get(prop.id) is prop

    def test_update_partial(self, properties):
        updated = properties.update("prop-2", {"price": 699000})

        assert updated.price == 699000
        assert updated.ref == "BCN-002"
        assert properties.get("prop-2").price == 699000

    def test_update_validates(self, properties):
        with pytest.raises(ValidationError):
            properties.update("prop-2", {"price": -1})

    def test_delete(self, properties):
        properties.delete("prop-6")

        with pytest.raises(NotFoundError):
            properties.get("prop-6")

    @pytest.mark.parametrize(
        "prop_id,status",
        [
            ("prop-5", "active"),
            ("prop-1", "reserved"),
            ("prop-1", "sold"),
            ("prop-1", "rented"),
            ("prop-4", "active"),
            ("prop-4", "sold"),
        ],
    )
    def test_allowed_transitions(self, properties, prop_id, status):
        assert properties.change_status(prop_id, status).status == status

    @pytest.mark.parametrize(
        "prop_id,status",
        [
            ("prop-5", "sold"),
            ("prop-6", "active"),
            ("prop-1", "active"),
        ],
    )
    def test_rejected_transitions(self, properties, prop_id, status):
        before = properties.get(prop_id).status

        with pytest.raises(InvalidTransitionError):
            properties.change_status(prop_id, status)

        assert properties.get(prop_id).status == before

    def test_transitions_cover_every_status(self):
        statuses = set(get_args(PropertyStatus))

        assert set(PROPERTY_TRANSITIONS) == statuses
        assert set().union(*PROPERTY_TRANSITIONS.values()) <= statuses


@pytest.mark.unit
class TestLeadRepository:
    """Pipeline de leads."""

    def test_by_stage(self, leads):
        assert [lead.id for lead in leads.by_stage("qualified")] == ["lead-1"]

    def test_move_to_lost_records_reason(self, leads):
        lead = leads.move_to_stage("lead-2", "lost", lost_reason="Sin financiación")

        assert lead.stage == "lost"
        assert lead.lost_reason == "Sin financiación"

    def test_leaving_lost_clears_reason(self, leads):
        lead = leads.move_to_stage("lead-5", "qualified")

        assert lead.stage == "qualified"
        assert lead.lost_reason is None

    def test_reason_ignored_for_other_stages(self, leads):
        lead = leads.move_to_stage("lead-1", "offer", lost_reason="no aplica")

        assert lead.lost_reason is None

    def test_reason_too_long(self, leads):
        with pytest.raises(ValueError, match="240"):
            leads.move_to_stage("lead-1", "lost", lost_reason="x" * 241)

        assert leads.get("lead-1").stage == "qualified"

    def test_reason_at_limit(self, leads):
        lead = leads.move_to_stage("lead-1", "lost", lost_reason="x" * 240)

        assert len(lead.lost_reason) == 240

    def test_stale_reason_on_stored_lead_is_cleared(self, leads):
        leads.items["lead-1"] = leads.get("lead-1").model_copy(
            update={"stage": "new", "lost_reason": "Volvió a contactar"}
        )

        lead = leads.move_to_stage("lead-1", "visiting")

        assert lead.stage == "visiting"
        assert lead.lost_reason is None

    def test_missing_lead(self, leads):
        with pytest.raises(NotFoundError, match="Lead not found"):
            leads.move_to_stage("lead-99", "won")


@pytest.mark.unit
class TestVisitRepository:
    """Visitas."""

    def test_for_property(self, store):
        visits = VisitRepository(store)

        assert [v.id for v in visits.for_property("prop-1")] == ["visit-1"]

    def test_create_without_timestamps(self, store):
        visits = VisitRepository(store)

        visit = visits.create(
            {"property_id": "prop-3", "lead_id": "lead-3", "when": "2026-01-10T10:00:00+00:00"}
        )

        assert visit.status == "scheduled"
        assert visits.for_property("prop-3") == [visit]
