"""
Generador de textos comerciales.

Plantillas fijas con los datos de la propiedad interpolados:
- Anuncios en tres estilos (friendly, luxury, investor)
- E-mail comercial
- Guion de reel de 15 o 30 segundos
"""

import random
from typing import Optional

import structlog

from inmoflow.config import AD_STYLES, Settings, get_settings
from inmoflow.formatting import format_amount, format_number, round_half_up
from inmoflow.models import EmailContext, Property

logger = structlog.get_logger()

FRIENDLY_AD_TEMPLATE = """🏠 ¡Descubre tu nuevo hogar en {city}!

{title} - €{price}

✨ {rooms} habitaciones, {baths} baños
📐 {area}m² de puro confort
{balcony_line}
{parking_line}

{description}

¡Ven a visitarlo! Te va a enamorar desde el primer momento."""

LUXURY_AD_TEMPLATE = """EXCLUSIVA PROPIEDAD EN {city_upper}

{title}
Precio: €{price}

Características excepcionales:
• {rooms} dormitorios de diseño
• {baths} baños de alta gama  
• {area}m² de elegancia
{elevator_line}
{parking_line}

{description}

Para inversores y compradores exigentes que buscan lo excepcional."""

INVESTOR_AD_TEMPLATE = """OPORTUNIDAD DE INVERSIÓN - {city}

REF: {ref}
Precio: €{price}
Rentabilidad estimada: 5.2% anual

Datos técnicos:
- {rooms}H/{baths}B
- {area}m² útiles
- Año construcción: {year}
- Calificación energética: {energy_label}

ROI proyectado:
• Alquiler mensual estimado: €{monthly_rent}
• Gastos anuales: ~€{yearly_expenses}
• Revalorización anual esperada: 3-4%

Activo sólido en ubicación estratégica."""

EMAIL_TEMPLATE = """Asunto: {subject}

Estimado/a {to},

Espero que este mensaje le encuentre bien.

{goal}

He preparado la siguiente información que puede ser de su interés:

{bullets}

Quedo a su disposición para cualquier consulta adicional o para concertar una visita en el momento que mejor le convenga.

Un cordial saludo,

{agency_name}
📞 {agency_phone}
📧 {agency_email}"""

SHORT_REEL_TEMPLATE = """[0-2s] {hook}

[3-5s] Plano general de la fachada

[6-8s] Salón principal - "{area}m² de pura comodidad"

[9-11s] Cocina/dormitorio principal

[12-15s] "€{price} en {city} - ¡Visitala ya!\""""

LONG_REEL_TEMPLATE = """[0-3s] {hook}

[4-7s] Fachada exterior con transición suave

[8-12s] Tour por salón - "{rooms} dormitorios, {baths} baños"

[13-17s] Cocina moderna / detalles únicos

[18-22s] Dormitorio principal / balcón (si tiene)

[23-26s] Vista general final

[27-30s] "€{price} - {city}"
[27-30s] "Más info en bio 👆\""""

REEL_HOOKS = [
    "¿Buscas casa? Este lugar te va a sorprender...",
    "La casa de tus sueños existe, y está aquí",
    "Tour de 30 segundos por tu futuro hogar",
    "Esto no es solo una casa, es tu próximo capítulo",
]

SHORT_REEL_MAX_SECONDS = 15

# Ratios del anuncio para inversores
MONTHLY_RENT_RATIO = 0.004
YEARLY_EXPENSES_RATIO = 0.01


class Copywriter:
    """Redacta anuncios, e-mails y guiones a partir de plantillas."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

    def _property_context(self, prop: Property) -> dict:
        features = prop.features
        return {
            "city": prop.address.city,
            "city_upper": prop.address.city.upper(),
            "title": prop.title,
            "ref": prop.ref,
            "price": format_amount(prop.price),
            "rooms": features.rooms,
            "baths": features.baths,
            "area": format_number(features.area),
        }

    def write_ad(self, prop: Property, style: str) -> str:
        """
        Genera un anuncio para la propiedad.

        Args:
            prop: Propiedad a anunciar
            style: 'friendly', 'luxury' o 'investor'

        Raises:
            ValueError: Si el estilo no existe
        """
        if style not in AD_STYLES:
            raise ValueError(f"Estilo de anuncio no soportado: {style}. Usar {', '.join(AD_STYLES)}")

        ctx = self._property_context(prop)
        features = prop.features

        if style == "friendly":
            text = FRIENDLY_AD_TEMPLATE.format(
                balcony_line="🌿 Con balcón para disfrutar" if features.has_balcony else "",
                parking_line="🚗 Plaza de parking incluida" if features.parking else "",
                description=prop.description
                or "Una oportunidad única en una ubicación privilegiada.",
                **ctx,
            )
        elif style == "luxury":
            text = LUXURY_AD_TEMPLATE.format(
                elevator_line="• Acceso con ascensor privado" if features.has_elevator else "",
                parking_line="• Plaza de parking exclusiva" if features.parking else "",
                description=prop.description
                or "Una residencia que define el estándar de lujo moderno.",
                **ctx,
            )
        else:
            text = INVESTOR_AD_TEMPLATE.format(
                year=features.year or "N/A",
                energy_label=features.energy_label or "N/A",
                monthly_rent=round_half_up(prop.price * MONTHLY_RENT_RATIO),
                yearly_expenses=round_half_up(prop.price * YEARLY_EXPENSES_RATIO),
                **ctx,
            )

        logger.debug("Anuncio generado", property_id=prop.id, style=style, chars=len(text))
        return text

    def write_email(self, context: EmailContext) -> str:
        """Redacta un e-mail comercial con los puntos indicados."""
        return EMAIL_TEMPLATE.format(
            subject=context.subject,
            to=context.to,
            goal=context.goal,
            bullets="\n".join(f"• {bullet}" for bullet in context.bullets),
            agency_name=self.settings.agency_name,
            agency_phone=self.settings.agency_phone,
            agency_email=self.settings.agency_email,
        )

    def pick_hook(self) -> str:
        return self.rng.choice(REEL_HOOKS)

    def write_reel_script(self, prop: Property, seconds: int) -> str:
        """
        Genera el guion de un reel con tomas cronometradas.

        Hasta 15 segundos usa el guion corto; por encima, el de 30.
        """
        template = SHORT_REEL_TEMPLATE if seconds <= SHORT_REEL_MAX_SECONDS else LONG_REEL_TEMPLATE
        return template.format(hook=self.pick_hook(), **self._property_context(prop))
