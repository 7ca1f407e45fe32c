"""
Modelos de datos del sistema.

- Catálogo: Property (con Address, Features, MediaItem)
- Pipeline: Lead (con LeadPreferences), Visit
- IA: MatchResult, ValuationInput/ValuationResult, EmailContext
"""

from inmoflow.models.base import CamelModel
from inmoflow.models.property import Address, Features, MediaItem, Property
from inmoflow.models.lead import Lead, LeadPreferences, Visit
from inmoflow.models.ai import (
    MatchResult,
    ValuationInput,
    ValuationResult,
    Comparable,
    EmailContext,
    KpiData,
    FunnelStage,
)

__all__ = [
    "CamelModel",
    # Catálogo
    "Address",
    "Features",
    "MediaItem",
    "Property",
    # Pipeline
    "Lead",
    "LeadPreferences",
    "Visit",
    # IA
    "MatchResult",
    "ValuationInput",
    "ValuationResult",
    "Comparable",
    "EmailContext",
    # Analytics
    "KpiData",
    "FunnelStage",
]
