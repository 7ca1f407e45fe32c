"""
Estimador de precio de mercado.

Precio base por m² según ciudad, multiplicado por la superficie y
ajustado por características (ascensor, balcón, parking, eficiencia
energética, antigüedad). Los comparables son sintéticos: varían
aleatoriamente alrededor del precio sugerido.
"""

import random
import string
from typing import Optional

import structlog

from inmoflow.config import CITY_PRICE_PER_SQM, Settings, get_settings
from inmoflow.formatting import format_number, round_half_up
from inmoflow.models import Comparable, ValuationInput, ValuationResult

logger = structlog.get_logger()

RANGE_LOW_FACTOR = 0.9
RANGE_HIGH_FACTOR = 1.1

HIGH_EFFICIENCY_LABELS = ("A", "B")
MODERN_CONSTRUCTION_AFTER = 2010

CLOSING_RATIONALE = "Comparison with similar properties in the area"

# (distancia km, variación mínima de precio, amplitud, delta máximo de m²)
COMPARABLE_PROFILES = [
    (0.3, 0.95, 0.10, 20),
    (0.7, 0.92, 0.16, 30),
    (1.2, 0.88, 0.24, 40),
]


class PriceEstimator:
    """
    Tasador heurístico.

    El cálculo del precio y del rango es determinista; solo los
    comparables dependen de la fuente aleatoria inyectada.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self._city_prices = {
            city.strip().casefold(): price for city, price in CITY_PRICE_PER_SQM.items()
        }

    def base_price_for_city(self, city: str) -> int:
        """Precio €/m² de la ciudad, o el valor por defecto si no está tabulada."""
        key = (city or "").strip().casefold()
        return self._city_prices.get(key, self.settings.default_price_per_sqm)

    def _apply_adjustments(self, valuation_input: ValuationInput, price: float) -> tuple[float, list[str]]:
        features = valuation_input.features
        adjustments: list[str] = []

        if features.has_elevator:
            price *= 1.05
            adjustments.append("Elevator adds 5%")

        if features.has_balcony:
            price *= 1.03
            adjustments.append("Balcony adds 3%")

        if features.parking:
            price *= 1.08
            adjustments.append("Parking adds 8%")

        if features.energy_label in HIGH_EFFICIENCY_LABELS:
            price *= 1.04
            adjustments.append("High energy efficiency adds 4%")

        if features.year and features.year > MODERN_CONSTRUCTION_AFTER:
            price *= 1.02
            adjustments.append("Modern construction adds 2%")

        return price, adjustments

    def _random_ref(self) -> str:
        alphabet = string.ascii_uppercase + string.digits
        return "REF-" + "".join(self.rng.choices(alphabet, k=6))

    def generate_comparables(
        self, valuation_input: ValuationInput, suggested_price: float
    ) -> list[Comparable]:
        """Genera tres comparables a distancia creciente."""
        area = valuation_input.features.area
        rooms = valuation_input.features.rooms
        rng = self.rng

        comps = []
        for index, (distance, low, spread, area_delta) in enumerate(COMPARABLE_PROFILES):
            if index == 0:
                comp_rooms = rooms
            elif index == 1:
                comp_rooms = rooms + (1 if rng.random() > 0.5 else 0)
            else:
                comp_rooms = max(1, rooms + round_half_up((rng.random() - 0.5) * 2))

            comps.append(
                Comparable(
                    ref=self._random_ref(),
                    distance_km=distance,
                    price=round_half_up(suggested_price * (low + rng.random() * spread)),
                    area=area + round_half_up((rng.random() - 0.5) * area_delta),
                    rooms=comp_rooms,
                )
            )
        return comps

    def estimate(self, valuation_input: ValuationInput) -> ValuationResult:
        """
        Tasa un inmueble.

        Args:
            valuation_input: Dirección y características

        Returns:
            ValuationResult con precio sugerido, rango ±10%, tres
            comparables y las líneas de justificación
        """
        city = valuation_input.address.city
        area = valuation_input.features.area
        base_price = self.base_price_for_city(city)

        price, adjustments = self._apply_adjustments(valuation_input, base_price * area)
        comps = self.generate_comparables(valuation_input, price)

        result = ValuationResult(
            suggested_price=round_half_up(price),
            range=(
                round_half_up(price * RANGE_LOW_FACTOR),
                round_half_up(price * RANGE_HIGH_FACTOR),
            ),
            comps=comps,
            rationale=[
                f"Base price: €{base_price}/m² in {city}",
                f"Area adjustment: {format_number(area)}m²",
                *adjustments,
                CLOSING_RATIONALE,
            ],
        )

        logger.debug(
            "Valuación calculada",
            city=city,
            area=area,
            suggested_price=result.suggested_price,
            adjustments=len(adjustments),
        )
        return result


def estimate_price(
    valuation_input: ValuationInput,
    rng: Optional[random.Random] = None,
    settings: Optional[Settings] = None,
) -> ValuationResult:
    """Atajo funcional sobre PriceEstimator."""
    return PriceEstimator(settings=settings, rng=rng).estimate(valuation_input)
