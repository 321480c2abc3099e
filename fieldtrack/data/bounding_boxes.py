"""
STATIC BOUNDING-BOX REFERENCE TABLES
Coarse country and first-level region rectangles for Latin America.
Degrees, WGS84. Bounds are inclusive on all four edges.

ORDER IS PRIORITY: boxes overlap, the first matching box wins.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lat/lng rectangle with a display name."""
    name: str
    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float

    def contains(self, lat: float, lng: float) -> bool:
        # NaN fails every comparison, so it never matches
        return self.lat_min <= lat <= self.lat_max and self.lng_min <= lng <= self.lng_max


# --- CANONICAL COUNTRY NAMES ---

GUATEMALA = "Guatemala"
EL_SALVADOR = "El Salvador"
HONDURAS = "Honduras"
NICARAGUA = "Nicaragua"
COSTA_RICA = "Costa Rica"
PANAMA = "Panamá"
COLOMBIA = "Colombia"
MEXICO = "México"
UNITED_STATES = "Estados Unidos"
CANADA = "Canadá"

# --- DEFAULT LABELS ---

MEXICO_DEFAULT_REGION = "Otra región"
GUATEMALA_CAPITAL = "Guatemala (Capital)"
DETECTED_REGION_PLACEHOLDER = "Región detectada"


# --- COUNTRY TABLE ---
# Central America first: Mexico's box is coarse and swallows its neighbours.

COUNTRY_BOXES: Tuple[BoundingBox, ...] = (
    BoundingBox(GUATEMALA, 13.0, 17.8, -92.5, -88.0),
    BoundingBox(EL_SALVADOR, 12.0, 14.5, -90.5, -87.0),
    BoundingBox(HONDURAS, 12.5, 16.5, -89.5, -83.0),
    BoundingBox(COSTA_RICA, 8.0, 11.5, -86.0, -82.5),
    BoundingBox(PANAMA, 7.0, 9.7, -83.0, -77.0),
    BoundingBox(COLOMBIA, -4.5, 13.5, -82.0, -66.0),
    BoundingBox(MEXICO, 14.5, 32.7, -118.4, -86.7),
    BoundingBox(UNITED_STATES, 24.0, 50.0, -130.0, -65.0),
    BoundingBox(CANADA, 42.0, 70.0, -140.0, -52.0),
)


# --- REGION TABLES ---

# Representative states only; everything else falls to "Otra región"
MEXICO_REGIONS: Tuple[BoundingBox, ...] = (
    BoundingBox("Quintana Roo", 17.8, 21.6, -89.2, -86.7),
    BoundingBox("Yucatán", 20.0, 22.5, -90.5, -88.0),
    BoundingBox("Campeche", 19.0, 21.5, -91.0, -89.0),
    BoundingBox("Baja California", 25.0, 32.7, -115.0, -109.0),
    BoundingBox("Chihuahua", 25.5, 31.8, -109.1, -103.2),
    BoundingBox("Durango", 22.3, 26.9, -107.1, -102.5),
    BoundingBox("Jalisco", 18.9, 22.8, -105.7, -101.5),
    BoundingBox("Ciudad de México", 19.1, 19.6, -99.4, -98.9),
)

# Capital metro box first, then departments
GUATEMALA_REGIONS: Tuple[BoundingBox, ...] = (
    BoundingBox(GUATEMALA_CAPITAL, 14.4, 14.8, -90.8, -90.3),
    BoundingBox("Petén", 16.0, 17.8, -92.3, -88.3),
    BoundingBox("Alta Verapaz", 15.5, 16.0, -91.5, -90.5),
    BoundingBox("Baja Verapaz", 15.0, 15.8, -90.8, -90.0),
    BoundingBox("Quiché", 14.8, 15.8, -92.0, -91.0),
    BoundingBox("Chimaltenango", 14.2, 15.0, -91.8, -90.8),
    BoundingBox("Sacatepéquez", 14.3, 14.8, -91.0, -90.5),
    BoundingBox("Jalapa", 13.8, 14.5, -90.5, -89.5),
    BoundingBox("Jutiapa", 13.5, 14.3, -90.2, -89.2),
    BoundingBox("Izabal", 15.2, 15.9, -89.5, -88.1),
    BoundingBox("Zacapa", 14.6, 15.2, -90.0, -89.0),
    BoundingBox("El Progreso", 14.8, 15.1, -90.2, -89.8),
    BoundingBox("Escuintla", 13.8, 14.5, -91.3, -90.3),
    BoundingBox("Santa Rosa", 13.8, 14.3, -90.8, -89.8),
    BoundingBox("Sololá", 14.4, 14.9, -91.5, -90.8),
    BoundingBox("Retalhuleu", 14.2, 14.7, -92.0, -91.2),
    BoundingBox("San Marcos", 14.8, 15.3, -92.3, -91.6),
    BoundingBox("Huehuetenango", 15.2, 16.0, -92.2, -91.2),
    BoundingBox("Quetzaltenango", 14.6, 15.0, -91.8, -91.2),
    BoundingBox("Totonicapán", 14.7, 15.1, -91.6, -91.1),
    BoundingBox("Suchitepéquez", 14.2, 14.6, -91.7, -91.0),
    BoundingBox("Chiquimula", 14.3, 14.9, -89.8, -89.1),
)

EL_SALVADOR_REGIONS: Tuple[BoundingBox, ...] = (
    BoundingBox("San Salvador", 13.5, 14.5, -89.5, -88.8),
    BoundingBox("Santa Ana", 13.8, 14.2, -89.8, -89.2),
    BoundingBox("La Libertad", 13.0, 13.8, -89.5, -88.8),
)

HONDURAS_REGIONS: Tuple[BoundingBox, ...] = (
    BoundingBox("Francisco Morazán", 14.0, 14.3, -87.5, -86.8),
    BoundingBox("Cortés", 15.3, 15.8, -88.2, -87.5),
    BoundingBox("Atlántida", 15.0, 15.5, -87.8, -87.0),
)

# Nicaragua never comes out of COUNTRY_BOXES; server geocoding can still supply it
NICARAGUA_REGIONS: Tuple[BoundingBox, ...] = (
    BoundingBox("Boaco", 12.2, 12.8, -85.8, -85.2),
    BoundingBox("Carazo", 11.4, 12.0, -86.8, -86.2),
    BoundingBox("Chinandega", 12.4, 13.4, -87.8, -86.8),
    BoundingBox("Chontales", 11.8, 12.6, -85.6, -84.8),
    BoundingBox("Costa Caribe Norte", 13.5, 15.1, -85.0, -83.2),
    BoundingBox("Costa Caribe Sur", 11.0, 13.5, -85.0, -82.8),
    BoundingBox("Estelí", 13.0, 13.6, -86.8, -86.0),
    BoundingBox("Granada", 11.7, 12.1, -86.2, -85.8),
    BoundingBox("Jinotega", 13.0, 13.8, -86.4, -85.4),
    BoundingBox("León", 12.2, 12.8, -87.2, -86.4),
    BoundingBox("Madriz", 13.3, 13.7, -86.8, -86.2),
    BoundingBox("Managua", 11.8, 12.4, -86.6, -85.8),
    BoundingBox("Masaya", 11.8, 12.2, -86.4, -85.8),
    BoundingBox("Matagalpa", 12.8, 13.6, -86.2, -85.2),
    BoundingBox("Nueva Segovia", 13.6, 14.0, -86.8, -86.0),
    BoundingBox("Río San Juan", 10.8, 11.6, -85.4, -83.8),
    BoundingBox("Rivas", 11.0, 11.8, -86.0, -85.4),
)

REGION_BOXES: Dict[str, Tuple[BoundingBox, ...]] = {
    MEXICO: MEXICO_REGIONS,
    GUATEMALA: GUATEMALA_REGIONS,
    EL_SALVADOR: EL_SALVADOR_REGIONS,
    HONDURAS: HONDURAS_REGIONS,
    NICARAGUA: NICARAGUA_REGIONS,
}

# Default when a country's table has no match (Guatemala depends on mode)
REGION_DEFAULTS: Dict[str, str] = {
    MEXICO: MEXICO_DEFAULT_REGION,
    EL_SALVADOR: EL_SALVADOR,
    HONDURAS: HONDURAS,
    NICARAGUA: NICARAGUA,
}


# --- DROPDOWN CATALOG ---
# Full first-level subdivisions, independent of which ones have boxes.

REGION_CATALOG: Dict[str, List[str]] = {
    MEXICO: [
        'Aguascalientes', 'Baja California', 'Baja California Sur', 'Campeche', 'Chiapas', 'Chihuahua',
        'Ciudad de México', 'Coahuila', 'Colima', 'Durango', 'Estado de México', 'Guanajuato',
        'Guerrero', 'Hidalgo', 'Jalisco', 'Michoacán', 'Morelos', 'Nayarit', 'Nuevo León',
        'Oaxaca', 'Puebla', 'Querétaro', 'Quintana Roo', 'San Luis Potosí', 'Sinaloa',
        'Sonora', 'Tabasco', 'Tamaulipas', 'Tlaxcala', 'Veracruz', 'Yucatán', 'Zacatecas',
    ],
    GUATEMALA: [
        GUATEMALA_CAPITAL, 'Alta Verapaz', 'Baja Verapaz', 'Chimaltenango', 'Chiquimula',
        'El Progreso', 'Escuintla', 'Huehuetenango', 'Izabal', 'Jalapa', 'Jutiapa', 'Petén',
        'Quetzaltenango', 'Quiché', 'Retalhuleu', 'Sacatepéquez', 'San Marcos', 'Santa Rosa',
        'Sololá', 'Suchitepéquez', 'Totonicapán', 'Zacapa',
    ],
    EL_SALVADOR: [
        'Ahuachapán', 'Cabañas', 'Chalatenango', 'Cuscatlán', 'La Libertad', 'La Paz', 'La Unión',
        'Morazán', 'San Miguel', 'San Salvador', 'San Vicente', 'Santa Ana', 'Sonsonate', 'Usulután',
    ],
    HONDURAS: [
        'Atlántida', 'Choluteca', 'Colón', 'Comayagua', 'Copán', 'Cortés', 'El Paraíso',
        'Francisco Morazán', 'Gracias a Dios', 'Intibucá', 'Islas de la Bahía', 'La Paz', 'Lempira',
        'Ocotepeque', 'Olancho', 'Santa Bárbara', 'Valle', 'Yoro',
    ],
    NICARAGUA: [
        'Boaco', 'Carazo', 'Chinandega', 'Chontales', 'Costa Caribe Norte', 'Costa Caribe Sur',
        'Estelí', 'Granada', 'Jinotega', 'León', 'Madriz', 'Managua', 'Masaya', 'Matagalpa',
        'Nueva Segovia', 'Río San Juan', 'Rivas',
    ],
    COSTA_RICA: ['Cartago', 'Guanacaste', 'Heredia', 'Limón', 'Puntarenas', 'San José'],
}


# --- NAME ALIASES ---
# Keys are compared after accent stripping and casefolding.

COUNTRY_ALIASES: Dict[str, str] = {
    "guatemala": GUATEMALA,
    "el salvador": EL_SALVADOR,
    "honduras": HONDURAS,
    "nicaragua": NICARAGUA,
    "costa rica": COSTA_RICA,
    "panama": PANAMA,
    "colombia": COLOMBIA,
    "mexico": MEXICO,
    "estados unidos": UNITED_STATES,
    "estados unidos de america": UNITED_STATES,
    "united states": UNITED_STATES,
    "united states of america": UNITED_STATES,
    "usa": UNITED_STATES,
    "canada": CANADA,
}
