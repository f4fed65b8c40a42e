# core/world_constants.py
"""
Constantes universales del generador.
Incluye tipos espectrales, tipos de planeta, vocabularios de civilización,
propiedades de artefactos y la paleta de colores del grafo.
"""
from typing import Dict, List

# --- ESTRELLAS ---

# Tipos espectrales: color de mapa y rangos de referencia
SPECTRAL_TYPES = {
    "O": {"color": "#9bb0ff", "temp_min": 30000, "temp_max": 50000, "mass_min": 16, "mass_max": 50},
    "B": {"color": "#aabfff", "temp_min": 10000, "temp_max": 30000, "mass_min": 2.1, "mass_max": 16},
    "A": {"color": "#cad7ff", "temp_min": 7500, "temp_max": 10000, "mass_min": 1.4, "mass_max": 2.1},
    "F": {"color": "#f8f7ff", "temp_min": 6000, "temp_max": 7500, "mass_min": 1.04, "mass_max": 1.4},
    "G": {"color": "#fff4ea", "temp_min": 5000, "temp_max": 6000, "mass_min": 0.8, "mass_max": 1.04},
    "K": {"color": "#ffd2a1", "temp_min": 3500, "temp_max": 5000, "mass_min": 0.45, "mass_max": 0.8},
    "M": {"color": "#ffcc6f", "temp_min": 2000, "temp_max": 3500, "mass_min": 0.08, "mass_max": 0.45},
}

# Umbrales de temperatura (K) para clasificar la estrella principal, de mayor a menor
SPECTRAL_TEMPERATURE_THRESHOLDS = [
    ("O", 30000), ("B", 10000), ("A", 7500), ("F", 6000), ("G", 5000), ("K", 3500),
]

# Umbrales de masa (masas solares) para compañeras binarias
COMPANION_MASS_THRESHOLDS = [
    ("O", 16), ("B", 2.1), ("A", 1.4), ("F", 1.04), ("G", 0.8), ("K", 0.45),
]

# Mezcla de masas: (probabilidad acumulada, mínimo, máximo)
STAR_MASS_BUCKETS = [
    (0.70, 0.08, 0.5),
    (0.90, 0.5, 1.5),
    (0.98, 1.5, 10.0),
    (1.00, 10.0, 50.0),
]

STAR_MASS_MIN = 0.08
STAR_MASS_MAX = 50.0
STAR_TEMPERATURE_CAP = 50000
UNIVERSE_AGE_GYR = 13.8

# Fracciones de vida que separan las fases evolutivas
EVOLUTION_PROTOSTAR = 0.1
EVOLUTION_MAIN_SEQUENCE = 0.9
EVOLUTION_GIANT = 0.95
EVOLUTION_COLLAPSE = 0.98
MASSIVE_STAR_THRESHOLD = 8
BLACK_HOLE_THRESHOLD = 20

STAR_FEATURE_CHANCES = {
    "pulsar": 0.05,
    "magnetar": 0.02,
    "variable": 0.10,
    "nova": 0.03,
}

# --- PLANETAS ---

PLANET_TYPES = {
    "molten": {"color": "#FF6347", "composition": ("iron", "silicate", "magma"), "density": 1.3},
    "terrestrial": {"color": "#4CAF50", "composition": ("silicate", "iron", "water"), "density": 1.0},
    "rocky": {"color": "#888888", "composition": ("silicate", "metal", "carbon"), "density": 1.2},
    "gas-giant": {"color": "#CD853F", "composition": ("hydrogen", "helium", "methane"), "density": 0.3},
    "ice-giant": {"color": "#87CEEB", "composition": ("water", "ammonia", "methane"), "density": 0.6},
    "frozen": {"color": "#E0FFFF", "composition": ("ice", "rock", "methane"), "density": 0.8},
}

# Radio (radios terrestres) por clase de tamaño: (mínimo, amplitud)
PLANET_RADIUS_RANGES = {
    "small": (0.1, 0.7),
    "medium": (0.7, 0.9),
    "large": (1.5, 10.0),
}

MAX_MOONS_BY_TYPE = {
    "gas-giant": 30,
    "ice-giant": 15,
    "terrestrial": 3,
}
DEFAULT_MAX_MOONS = 2

# Puntos de habitabilidad (tope 100)
HABITABILITY_TEMP_IDEAL = (273, 323, 30)
HABITABILITY_TEMP_TOLERABLE = (223, 373, 15)
HABITABILITY_LIQUID_WATER = 25
HABITABILITY_MODERATE_ATMOSPHERE = 20
HABITABILITY_OXYGEN = 15
HABITABILITY_MAGNETIC_FIELD = 10
HABITABILITY_CAP = 100

# --- CIVILIZACIONES ---

CIVILIZATION_TRAITS: List[str] = [
    'aggressive', 'peaceful', 'curious', 'xenophobic', 'xenophilic', 'spiritual', 'materialistic',
    'collectivist', 'individualist', 'adaptive', 'traditional', 'expansionist', 'isolationist',
]

# Pares opuestos: se rechazan en la selección y penalizan la compatibilidad
TRAIT_OPPOSITES: Dict[str, str] = {
    'aggressive': 'peaceful',
    'xenophobic': 'xenophilic',
    'spiritual': 'materialistic',
    'collectivist': 'individualist',
    'traditional': 'adaptive',
    'expansionist': 'isolationist',
}

SPECIALIZATIONS: List[str] = [
    'energy', 'propulsion', 'warfare', 'agriculture', 'medicine', 'computing', 'robotics',
    'terraforming', 'biotechnology', 'psychology', 'architecture', 'art', 'trade',
]

GOVERNMENTS: List[str] = [
    'monarchy', 'democracy', 'oligarchy', 'technocracy', 'theocracy', 'dictatorship', 'hive-mind',
    'tribal', 'corporate', 'federation', 'collective', 'anarchy', 'military-junta',
]

EXPANSION_POLICIES: List[str] = ['colonization', 'conquest', 'trade', 'diplomacy', 'infiltration']

EXPANSION_POLICY_DESCRIPTIONS = {
    'conquest': "They tend to expand through military means.",
    'colonization': "Their focus is on settling new worlds.",
    'trade': "They primarily expand their influence via commerce.",
    'diplomacy': "Diplomatic outreach is their preferred method of interaction.",
    'infiltration': "They often operate subtly within other societies.",
}

# Artefactos propios de la civilización según nivel tecnológico: (nivel mínimo, probabilidad)
CIV_ORBITAL_STATION = (5, 0.7)
CIV_TRANSPORT_NETWORK = (7, 0.5)
CIV_MEGASTRUCTURE = (9, 0.3)

# --- ARTEFACTOS ---

ARTIFACT_PROPERTY_TABLES = {
    "ancient-ruins": {
        "extent": ['small', 'moderate', 'extensive', 'massive'],
        "preservation": ['poor', 'partial', 'good', 'excellent'],
        "technology": ['primitive', 'comparable', 'advanced', 'incomprehensible'],
    },
    "derelict-station": {
        "size": ['small', 'medium', 'large', 'enormous'],
        "condition": ['destroyed', 'severely damaged', 'partially intact', 'mostly intact'],
        "origin": ['unknown', 'ancient', 'recent', 'extragalactic'],
    },
    "anomaly": {
        "nature": ['gravitational', 'electromagnetic', 'quantum', 'temporal', 'dimensional'],
        "stability": ['stable', 'fluctuating', 'degrading', 'growing'],
        "origin": ['natural', 'artificial', 'unknown'],
    },
}

STANDALONE_ARTIFACT_TYPES = ['ancient-ruins', 'derelict-station', 'anomaly']
COLONY_PURPOSES = ['mining', 'agricultural', 'research', 'military', 'residential']
STATION_PURPOSES = ['military', 'scientific', 'residential', 'commercial']
TRANSPORT_TECHNOLOGIES = ['warp-gates', 'hyperspace-beacons', 'mass-accelerators']
MEGASTRUCTURE_KINDS = ['dyson-swarm', 'ringworld', 'artificial-planet', 'stellar-engine']

# --- COLORES DEL GRAFO ---

DEFAULT_STAR_COLOR = "#ffffff"
DEFAULT_PLANET_COLOR = "#888888"
EVOLUTION_COLORS = {
    "red-giant": "#ff6060",
    "red-supergiant": "#ff6060",
    "white-dwarf": "#f0f0ff",
    "neutron-star": "#c0ffff",
    "black-hole": "#111111",
}
INHABITED_PLANET_COLOR = "#FF4500"
HABITABLE_PLANET_COLOR = "#00BFFF"
CIVILIZATION_COLOR = "#FF4500"
COLONY_LINK_COLOR = "#FF8C00"
COMPANION_LINK_COLOR = "#aaaaaa"
PLANET_LINK_COLOR = "#555555"
MEGASTRUCTURE_COLOR = "#7851A9"
RELATIONSHIP_COLORS = {
    "alliance": "#2e7d32",
    "friendly": "#558b2f",
    "neutral": "#f9a825",
    "tense": "#e65100",
    "hostile": "#c62828",
}
DEFAULT_LINK_COLOR = "#aaaaaa"
