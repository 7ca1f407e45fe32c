"""
Tests del generador de textos comerciales.
"""

import random

import pytest

from inmoflow.marketing import REEL_HOOKS, Copywriter
from inmoflow.models import EmailContext


@pytest.fixture
def copywriter(settings, rng):
    return Copywriter(settings=settings, rng=rng)


@pytest.fixture
def salamanca(store):
    return store.properties["prop-1"]


@pytest.mark.unit
class TestAds:
    """Anuncios en los tres estilos."""

    def test_luxury_has_uppercase_city_and_formatted_price(self, copywriter, salamanca):
        text = copywriter.write_ad(salamanca, "luxury")

        assert text.startswith("EXCLUSIVA PROPIEDAD EN MADRID")
        assert "Precio: €850,000" in text
        assert "• Acceso con ascensor privado" in text
        assert "• Plaza de parking exclusiva" in text
        assert salamanca.description in text

    def test_luxury_features_block_layout(self, copywriter, salamanca):
        text = copywriter.write_ad(salamanca, "luxury")

        assert "• 3 dormitorios de diseño\n• 2 baños de alta gama  \n• 120m²" in text

    def test_friendly(self, copywriter, salamanca):
        text = copywriter.write_ad(salamanca, "friendly")

        assert "¡Descubre tu nuevo hogar en Madrid!" in text
        assert "Elegante piso en Salamanca - €850,000" in text
        assert "✨ 3 habitaciones, 2 baños" in text
        assert "📐 120m² de puro confort" in text
        assert "🌿 Con balcón para disfrutar" in text

    def test_friendly_without_extras_uses_fallbacks(self, copywriter, make_property):
        prop = make_property(price=199500.5)

        text = copywriter.write_ad(prop, "friendly")

        assert "balcón" not in text
        assert "parking" not in text
        assert "Una oportunidad única en una ubicación privilegiada." in text
        assert "€199,500.50" in text

    def test_investor(self, copywriter, salamanca):
        text = copywriter.write_ad(salamanca, "investor")

        assert text.startswith("OPORTUNIDAD DE INVERSIÓN - Madrid")
        assert "REF: MAD-001" in text
        assert "- 3H/2B" in text
        assert "Año construcción: 2015" in text
        assert "Calificación energética: B" in text
        assert "Alquiler mensual estimado: €3400" in text
        assert "Gastos anuales: ~€8500" in text

    def test_investor_missing_data(self, copywriter, make_property):
        text = copywriter.write_ad(make_property(), "investor")

        assert "Año construcción: N/A" in text
        assert "Calificación energética: N/A" in text

    def test_unknown_style(self, copywriter, salamanca):
        with pytest.raises(ValueError):
            copywriter.write_ad(salamanca, "poetic")


@pytest.mark.unit
class TestEmail:
    """E-mail comercial."""

    def test_email_layout(self, copywriter):
        context = EmailContext(
            to="María",
            subject="Nuevas opciones en Madrid",
            goal="Le escribo para compartir nuevas propiedades.",
            bullets=["Piso en Salamanca", "Ático en Chamberí"],
        )

        text = copywriter.write_email(context)

        assert text.startswith("Asunto: Nuevas opciones en Madrid")
        assert "Estimado/a María," in text
        assert "Le escribo para compartir nuevas propiedades." in text
        assert "• Piso en Salamanca\n• Ático en Chamberí" in text
        assert text.endswith("Equipo InmoFlow AI\n📞 +34 900 123 456\n📧 info@inmoflow.com")

    def test_signature_from_settings(self, settings, rng):
        custom = settings.model_copy(update={"agency_name": "Agencia Sol", "agency_email": "hola@sol.es"})

        text = Copywriter(settings=custom, rng=rng).write_email(EmailContext(to="Ana"))

        assert "Agencia Sol" in text
        assert "hola@sol.es" in text


@pytest.mark.unit
class TestReelScript:
    """Guiones de reel."""

    def test_short_script(self, copywriter, salamanca):
        text = copywriter.write_reel_script(salamanca, 15)
        first_line = text.splitlines()[0]

        assert first_line.startswith("[0-2s] ")
        assert first_line[len("[0-2s] "):] in REEL_HOOKS
        assert '"120m² de pura comodidad"' in text
        assert text.endswith('[12-15s] "€850,000 en Madrid - ¡Visitala ya!"')

    def test_long_script(self, copywriter, salamanca):
        text = copywriter.write_reel_script(salamanca, 16)

        assert text.startswith("[0-3s] ")
        assert '"3 dormitorios, 2 baños"' in text
        assert '[27-30s] "€850,000 - Madrid"' in text
        assert text.endswith('[27-30s] "Más info en bio 👆"')

    def test_hook_is_deterministic_with_seed(self, settings, salamanca):
        first = Copywriter(settings=settings, rng=random.Random(5)).write_reel_script(salamanca, 30)
        second = Copywriter(settings=settings, rng=random.Random(5)).write_reel_script(salamanca, 30)

        assert first == second

    def test_all_hooks_reachable(self, copywriter):
        hooks = {copywriter.pick_hook() for _ in range(200)}

        assert hooks == set(REEL_HOOKS)
