"""
Métricas del dashboard calculadas sobre el store.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from inmoflow.database import InMemoryStore
from inmoflow.models import FunnelStage, KpiData

FUNNEL_STAGES = ["new", "qualified", "visiting", "offer", "won"]
PIPELINE_VALUE_STAGES = ("offer", "won")
VISITS_WINDOW = timedelta(days=7)


def _parse_when(value: str) -> datetime:
    when = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when


def compute_kpis(store: InMemoryStore, now: Optional[datetime] = None) -> KpiData:
    """
    KPIs principales.

    weekly_visits cuenta las visitas posteriores a hace 7 días,
    incluidas las ya agendadas a futuro.
    """
    now = now or datetime.now(timezone.utc)
    leads = list(store.leads.values())

    won = sum(1 for lead in leads if lead.stage == "won")
    lost = sum(1 for lead in leads if lead.stage == "lost")
    closed = won + lost

    return KpiData(
        active_properties=sum(1 for p in store.properties.values() if p.is_active),
        new_leads=sum(1 for lead in leads if lead.stage == "new"),
        weekly_visits=sum(
            1 for v in store.visits.values() if _parse_when(v.when) > now - VISITS_WINDOW
        ),
        conversion_rate=round(won / closed * 100, 1) if closed else 0.0,
        pipeline_value=sum(
            lead.budget or 0 for lead in leads if lead.stage in PIPELINE_VALUE_STAGES
        ),
    )


def compute_funnel(store: InMemoryStore) -> list[FunnelStage]:
    """Cantidad de leads y presupuesto acumulado por etapa (sin "lost")."""
    funnel = []
    for stage in FUNNEL_STAGES:
        leads = [lead for lead in store.leads.values() if lead.stage == stage]
        funnel.append(
            FunnelStage(
                stage=stage,
                count=len(leads),
                value=sum(lead.budget or 0 for lead in leads),
            )
        )
    return funnel
