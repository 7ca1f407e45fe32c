"""
Datos de demostración del CRM.

Se cargan en el store en memoria al arrancar los scripts.
"""

from datetime import datetime, timedelta, timezone

from inmoflow.models import Lead, Property, Visit

PROPERTIES = [
    {
        "id": "prop-1",
        "ref": "MAD-001",
        "title": "Elegante piso en Salamanca",
        "description": "Precioso piso reformado en el barrio de Salamanca, con acabados de lujo y vistas despejadas.",
        "price": 850000,
        "currency": "EUR",
        "status": "active",
        "type": "flat",
        "address": {
            "street": "Calle Serrano 95",
            "city": "Madrid",
            "zip": "28006",
            "country": "España",
            "lat": 40.4318,
            "lng": -3.6883,
        },
        "features": {
            "rooms": 3,
            "baths": 2,
            "area": 120,
            "floor": 4,
            "hasElevator": True,
            "hasBalcony": True,
            "heating": "central",
            "parking": True,
            "year": 2015,
            "energyLabel": "B",
        },
        "media": [
            {"id": "media-1", "url": "https://images.pexels.com/photos/1643383/pexels-photo-1643383.jpeg", "kind": "photo"},
            {"id": "media-2", "url": "https://images.pexels.com/photos/1571460/pexels-photo-1571460.jpeg", "kind": "photo"},
        ],
        "tags": ["Lujo", "Centro", "Reformado"],
    },
    {
        "id": "prop-2",
        "ref": "BCN-002",
        "title": "Ático con terraza en Eixample",
        "description": "Espectacular ático con terraza de 40m² en pleno Eixample barcelonés.",
        "price": 720000,
        "currency": "EUR",
        "status": "active",
        "type": "flat",
        "address": {
            "street": "Passeig de Gràcia 88",
            "city": "Barcelona",
            "zip": "08008",
            "country": "España",
            "lat": 41.3851,
            "lng": 2.1734,
        },
        "features": {
            "rooms": 2,
            "baths": 2,
            "area": 95,
            "floor": 8,
            "hasElevator": True,
            "hasBalcony": True,
            "heating": "gas",
            "parking": False,
            "year": 2010,
            "energyLabel": "C",
        },
        "media": [
            {"id": "media-3", "url": "https://images.pexels.com/photos/1571453/pexels-photo-1571453.jpeg", "kind": "photo"},
        ],
        "tags": ["Ático", "Terraza", "Centro"],
    },
    {
        "id": "prop-3",
        "ref": "MAD-002",
        "title": "Estudio moderno en Malasaña",
        "price": 320000,
        "status": "active",
        "type": "studio",
        "address": {"street": "Calle Fuencarral 78", "city": "Madrid", "zip": "28004"},
        "features": {
            "rooms": 1,
            "baths": 1,
            "area": 45,
            "floor": 2,
            "heating": "electric",
            "year": 2019,
            "energyLabel": "B",
        },
        "tags": ["Reformado"],
    },
    {
        "id": "prop-4",
        "ref": "MAD-003",
        "title": "Chalet familiar en Las Rozas",
        "price": 650000,
        "status": "reserved",
        "type": "house",
        "address": {"street": "Avenida de Atenas 15", "city": "Las Rozas", "zip": "28232"},
        "features": {
            "rooms": 4,
            "baths": 3,
            "area": 180,
            "floor": 0,
            "heating": "gas",
            "parking": True,
            "year": 2015,
            "energyLabel": "C",
        },
    },
    {
        "id": "prop-5",
        "ref": "SEV-001",
        "title": "Piso luminoso en Triana",
        "price": 245000,
        "status": "draft",
        "type": "flat",
        "address": {"street": "Calle Betis 21", "city": "Sevilla", "zip": "41010"},
        "features": {"rooms": 2, "baths": 1, "area": 85, "hasBalcony": True, "year": 1998, "energyLabel": "E"},
    },
    {
        "id": "prop-6",
        "ref": "MAD-006",
        "title": "Apartamento acogedor en La Latina",
        "price": 420000,
        "status": "sold",
        "type": "flat",
        "address": {"street": "Calle de Toledo 89", "city": "Madrid", "zip": "28005"},
        "features": {"rooms": 2, "baths": 1, "area": 75, "floor": 3, "hasElevator": True, "year": 1985},
    },
]

LEADS = [
    {
        "id": "lead-1",
        "name": "María López",
        "email": "maria.lopez@email.com",
        "phone": "+34 666 777 888",
        "stage": "qualified",
        "budget": 800000,
        "preferences": {
            "city": "Madrid",
            "type": ["flat"],
            "minRooms": 2,
            "minArea": 100,
            "maxPrice": 900000,
            "mustHave": ["elevator", "parking"],
        },
        "source": "Website",
        "note": "Interesada en mudarse en 3 meses",
    },
    {
        "id": "lead-2",
        "name": "Roberto Silva",
        "email": "roberto.silva@email.com",
        "phone": "+34 655 444 333",
        "stage": "visiting",
        "budget": 600000,
        "preferences": {
            "city": "Barcelona",
            "type": ["flat", "studio"],
            "minRooms": 1,
            "minArea": 70,
            "maxPrice": 650000,
        },
        "source": "Portal",
    },
    {
        "id": "lead-3",
        "name": "Lucía Fernández",
        "email": "lucia.fernandez@email.com",
        "stage": "new",
        "source": "Referral",
    },
    {
        "id": "lead-4",
        "name": "Javier Moreno",
        "stage": "won",
        "budget": 450000,
        "preferences": {"city": "Madrid", "type": ["flat"], "minRooms": 2},
        "source": "Website",
    },
    {
        "id": "lead-5",
        "name": "Elena Ruiz",
        "stage": "lost",
        "budget": 300000,
        "lostReason": "Compró con otra agencia",
        "source": "Portal",
    },
]


def seed_properties() -> list[Property]:
    return [Property.model_validate(data) for data in PROPERTIES]


def seed_leads() -> list[Lead]:
    return [Lead.model_validate(data) for data in LEADS]


def seed_visits() -> list[Visit]:
    now = datetime.now(timezone.utc)
    return [
        Visit(
            id="visit-1",
            property_id="prop-1",
            lead_id="lead-1",
            when=(now + timedelta(days=2)).isoformat(),
            note="Primera visita, mostrar zona común",
            reminder_mins=60,
        ),
        Visit(
            id="visit-2",
            property_id="prop-2",
            lead_id="lead-2",
            when=(now - timedelta(days=3)).isoformat(),
            status="done",
        ),
    ]
