"""
Script para ejecutar las operaciones de IA sobre los datos de demo.

Uso:
    python -m inmoflow.scripts.run_ai match --lead-id lead-1
    python -m inmoflow.scripts.run_ai valuate --property-id prop-1
    python -m inmoflow.scripts.run_ai valuate --city Madrid --area 120 --elevator
    python -m inmoflow.scripts.run_ai ad --property-id prop-1 --style luxury
    python -m inmoflow.scripts.run_ai email --to "María" --subject "Nuevas opciones" --bullet "Piso en Salamanca"
    python -m inmoflow.scripts.run_ai reel --property-id prop-2 --seconds 30
    python -m inmoflow.scripts.run_ai kpis
"""

import argparse
import asyncio
import json
import logging
import sys

import structlog

from inmoflow.ai import AiAssistant, get_ai_driver
from inmoflow.analytics import compute_funnel, compute_kpis
from inmoflow.config import AD_STYLES, get_settings
from inmoflow.database import LeadRepository, PropertyRepository, get_store
from inmoflow.exceptions import InmoflowError
from inmoflow.models import Address, EmailContext, Features, ValuationInput

# Configurar logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s",
    force=True,
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def _dump(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Operaciones de IA de InmoFlow")
    parser.add_argument(
        "--driver",
        choices=["mock", "http"],
        default=None,
        help="Driver de IA (default: AI_DRIVER / AI_BASE_URL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="Matching de un lead contra el catálogo")
    match.add_argument("--lead-id", required=True)

    valuate = sub.add_parser("valuate", help="Tasación de un inmueble")
    valuate.add_argument("--property-id", help="Propiedad del catálogo a tasar")
    valuate.add_argument("--city", help="Ciudad (si no se usa --property-id)")
    valuate.add_argument("--area", type=float, help="Superficie en m²")
    valuate.add_argument("--rooms", type=int, default=2)
    valuate.add_argument("--elevator", action="store_true")
    valuate.add_argument("--balcony", action="store_true")
    valuate.add_argument("--parking", action="store_true")
    valuate.add_argument("--energy-label", choices=list("ABCDEFG"))
    valuate.add_argument("--year", type=int)

    ad = sub.add_parser("ad", help="Anuncio de una propiedad")
    ad.add_argument("--property-id", required=True)
    ad.add_argument("--style", choices=AD_STYLES, default="friendly")

    email = sub.add_parser("email", help="E-mail comercial")
    email.add_argument("--to", required=True)
    email.add_argument("--subject", default="")
    email.add_argument("--goal", default="")
    email.add_argument("--bullet", action="append", default=[], dest="bullets")

    reel = sub.add_parser("reel", help="Guion de reel")
    reel.add_argument("--property-id", required=True)
    reel.add_argument("--seconds", type=int, default=15)

    sub.add_parser("kpis", help="KPIs y embudo del pipeline")

    return parser


async def run_command(args: argparse.Namespace) -> str:
    """Ejecuta el subcomando y devuelve la salida a imprimir."""
    store = get_store()

    if args.command == "kpis":
        return _dump(
            {
                "kpis": compute_kpis(store).to_wire(),
                "funnel": [stage.to_wire() for stage in compute_funnel(store)],
            }
        )

    async with get_ai_driver(settings, driver=args.driver) as driver:
        assistant = AiAssistant(
            driver,
            properties=PropertyRepository(store),
            leads=LeadRepository(store),
        )

        if args.command == "match":
            results = await assistant.match_lead(args.lead_id)
            return _dump([r.to_wire() for r in results])

        if args.command == "valuate":
            if args.property_id:
                result = await assistant.value_property(args.property_id)
            else:
                if not args.city or args.area is None:
                    raise ValueError("valuate requiere --property-id o --city y --area")
                valuation_input = ValuationInput(
                    address=Address(city=args.city),
                    features=Features(
                        rooms=args.rooms,
                        area=args.area,
                        has_elevator=args.elevator,
                        has_balcony=args.balcony,
                        parking=args.parking,
                        energy_label=args.energy_label,
                        year=args.year,
                    ),
                )
                result = await driver.estimate_price(valuation_input)
            return _dump(result.to_wire())

        if args.command == "ad":
            return await assistant.write_ad(args.property_id, args.style)

        if args.command == "email":
            context = EmailContext(
                to=args.to, subject=args.subject, goal=args.goal, bullets=args.bullets
            )
            return await assistant.write_email(context)

        if args.command == "reel":
            return await assistant.write_reel_script(args.property_id, args.seconds)

    raise ValueError(f"Comando desconocido: {args.command}")


def main(argv=None):
    """Entry point del script."""
    args = build_parser().parse_args(argv)

    try:
        output = asyncio.run(run_command(args))
    except KeyboardInterrupt:
        logger.info("Operación interrumpida por usuario")
        sys.exit(130)
    except (InmoflowError, ValueError) as e:
        logger.error("Error ejecutando operación", command=args.command, error=str(e))
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
