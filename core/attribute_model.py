# core/attribute_model.py
"""
Modelo de Atributos Aleatorios.
Funciones puras que derivan cada campo de estrellas, planetas y civilizaciones
a partir de los campos ya calculados y del servicio de azar inyectado.
El orden de llamada importa: cada función asume que sus entradas existen.
"""
import math
from typing import Dict, List, Optional

from config.app_constants import (
    MAX_PLANETS_PER_STAR,
    TRAIT_SELECTION_ATTEMPTS,
    SPECIALIZATION_ATTEMPTS,
)
from core.models import PlanetType, StellarEvolution
from core.world_constants import (
    SPECTRAL_TEMPERATURE_THRESHOLDS,
    COMPANION_MASS_THRESHOLDS,
    STAR_MASS_BUCKETS,
    STAR_TEMPERATURE_CAP,
    UNIVERSE_AGE_GYR,
    EVOLUTION_PROTOSTAR,
    EVOLUTION_MAIN_SEQUENCE,
    EVOLUTION_GIANT,
    EVOLUTION_COLLAPSE,
    MASSIVE_STAR_THRESHOLD,
    BLACK_HOLE_THRESHOLD,
    STAR_FEATURE_CHANCES,
    PLANET_TYPES,
    PLANET_RADIUS_RANGES,
    MAX_MOONS_BY_TYPE,
    DEFAULT_MAX_MOONS,
    HABITABILITY_TEMP_IDEAL,
    HABITABILITY_TEMP_TOLERABLE,
    HABITABILITY_LIQUID_WATER,
    HABITABILITY_MODERATE_ATMOSPHERE,
    HABITABILITY_OXYGEN,
    HABITABILITY_MAGNETIC_FIELD,
    HABITABILITY_CAP,
    CIVILIZATION_TRAITS,
    TRAIT_OPPOSITES,
    SPECIALIZATIONS,
    GOVERNMENTS,
    EXPANSION_POLICIES,
)
from core.world_models import Atmosphere, Companion, Composition
from utils.random_utils import RandomService, round_to


# --- ESTRELLAS ---

def generate_star_mass(rng: RandomService) -> float:
    """Mezcla de cuatro tramos: la mayoría son enanas rojas."""
    roll = rng.random()
    for cumulative, low, high in STAR_MASS_BUCKETS:
        if roll < cumulative:
            return round_to(rng.number(low, high))
    _, low, high = STAR_MASS_BUCKETS[-1]
    return round_to(rng.number(low, high))


def calculate_luminosity(mass: float) -> float:
    return round_to(math.pow(mass, 3.5))


def calculate_star_temperature(mass: float) -> int:
    return math.floor(min(2000 + mass * 5000, STAR_TEMPERATURE_CAP))


def determine_spectral_type(temperature: int) -> str:
    for spectral, threshold in SPECTRAL_TEMPERATURE_THRESHOLDS:
        if temperature > threshold:
            return spectral
    return "M"


def determine_star_size(mass: float) -> str:
    if mass > 20: return 'supergiant'
    if mass > 5: return 'giant'
    if mass < 0.5: return 'dwarf'
    return 'medium'


def stellar_lifespan(mass: float) -> float:
    """Vida estimada en Gyr; masa nula se trata como 0.1."""
    return 10 / math.pow(mass or 0.1, 2.5)


def generate_star_age(mass: float, rng: RandomService) -> float:
    max_age = min(UNIVERSE_AGE_GYR, stellar_lifespan(mass))
    return round_to(rng.number(0.01, max_age or UNIVERSE_AGE_GYR))


def generate_rotation(rng: RandomService) -> float:
    return round_to(rng.number(0.1, 100))


def determine_if_binary(rng: RandomService) -> bool:
    return rng.chance(0.5)


def companion_spectral_type(mass: float) -> str:
    for spectral, threshold in COMPANION_MASS_THRESHOLDS:
        if mass > threshold:
            return spectral
    return "M"


def generate_companions(mass: float, rng: RandomService) -> List[Companion]:
    """Una o dos compañeras, de 0.3 a 1.0 veces la masa principal."""
    companions = []
    count = rng.randint(1, 2)
    for _ in range(count):
        companion_mass = mass * (0.3 + rng.random() * 0.7)
        orbit_distance = 10 + rng.random() * 100
        orbital_period = math.sqrt(math.pow(orbit_distance, 3) / (mass + companion_mass))
        companions.append(Companion(
            mass=round_to(companion_mass),
            spectral_type=companion_spectral_type(companion_mass),
            orbit_distance=round_to(orbit_distance),
            orbital_period=round_to(orbital_period),
        ))
    return companions


def calculate_evolution(mass: float, age: float) -> StellarEvolution:
    lifespan = stellar_lifespan(mass)
    fraction = age / (lifespan or 0.01)

    if fraction < EVOLUTION_PROTOSTAR:
        return StellarEvolution.PROTOSTAR
    if fraction < EVOLUTION_MAIN_SEQUENCE:
        return StellarEvolution.MAIN_SEQUENCE

    if mass > MASSIVE_STAR_THRESHOLD:
        if fraction < EVOLUTION_GIANT:
            return StellarEvolution.RED_SUPERGIANT
        if fraction < EVOLUTION_COLLAPSE:
            return StellarEvolution.SUPERNOVA_IMMINENT
        return StellarEvolution.BLACK_HOLE if mass > BLACK_HOLE_THRESHOLD else StellarEvolution.NEUTRON_STAR

    if fraction < EVOLUTION_GIANT:
        return StellarEvolution.RED_GIANT
    return StellarEvolution.WHITE_DWARF


def generate_star_features(evolution: StellarEvolution, spectral_type: str, rng: RandomService) -> List[str]:
    features = []
    for feature, probability in STAR_FEATURE_CHANCES.items():
        if rng.chance(probability):
            features.append(feature)

    if evolution in (StellarEvolution.RED_GIANT, StellarEvolution.RED_SUPERGIANT):
        features.append('stellar-wind')
    if evolution == StellarEvolution.SUPERNOVA_IMMINENT:
        features.append('unstable')
    if spectral_type in ('O', 'B'):
        features.append('intense-radiation')
    return features


def planet_count_for(
    evolution: StellarEvolution,
    spectral_type: str,
    is_binary: bool,
    rng: RandomService,
    max_planets: int = MAX_PLANETS_PER_STAR,
) -> int:
    """Cantidad de planetas según fase evolutiva y clase espectral."""
    if evolution == StellarEvolution.MAIN_SEQUENCE:
        if spectral_type == 'M':
            count = rng.randint(1, 5)
        elif spectral_type in ('G', 'K'):
            count = rng.randint(2, 7)
        else:
            count = rng.randint(1, 4)
    elif evolution == StellarEvolution.PROTOSTAR:
        count = rng.randint(1, 3)
    elif evolution in (StellarEvolution.RED_GIANT, StellarEvolution.RED_SUPERGIANT):
        count = rng.randint(0, 2)
    else:
        count = rng.randint(0, 1)

    if is_binary:
        count = math.floor(count * 0.6)
    return min(count, max_planets)


# --- PLANETAS ---

def generate_orbit(index: int, rng: RandomService) -> float:
    """Ley tipo Titius-Bode con un ±15% de dispersión."""
    base = 0.4 + 0.3 * math.pow(2, index)
    variation = base * (rng.random() * 0.3 - 0.15)
    return round_to(base + variation)


def generate_planet_size(rng: RandomService) -> str:
    roll = rng.random()
    if roll < 0.5: return 'small'
    if roll < 0.8: return 'medium'
    return 'large'


def calculate_planet_radius(size: str, rng: RandomService) -> float:
    if size not in PLANET_RADIUS_RANGES:
        return 1.0
    low, span = PLANET_RADIUS_RANGES[size]
    return round_to(low + rng.random() * span)


def _effective_luminosity(luminosity: Optional[float]) -> float:
    # Las enanas más pequeñas redondean a 0; se toma la luminosidad solar
    return luminosity or 1.0


def determine_planet_type(orbit: float, size: str, luminosity: Optional[float], rng: RandomService) -> PlanetType:
    """Clasificación por posición relativa a la zona habitable."""
    if luminosity is None:
        return PlanetType.ROCKY

    zone_center = math.sqrt(_effective_luminosity(luminosity))
    inner = zone_center * 0.75
    outer = zone_center * 1.25

    if orbit < inner * 0.5:
        return PlanetType.MOLTEN if rng.chance(0.7) else PlanetType.ROCKY
    if orbit < inner:
        return PlanetType.ROCKY if rng.chance(0.8) else PlanetType.TERRESTRIAL
    if orbit <= outer:
        return PlanetType.TERRESTRIAL if rng.chance(0.6) else PlanetType.ROCKY
    if orbit < outer * 2:
        if size == 'large' and rng.chance(0.7):
            return PlanetType.GAS_GIANT
        return PlanetType.ROCKY if rng.chance(0.5) else PlanetType.ICE_GIANT
    if rng.chance(0.6) and size == 'large':
        return PlanetType.ICE_GIANT
    return PlanetType.FROZEN


def _type_data(planet_type: PlanetType) -> Dict:
    return PLANET_TYPES.get(PlanetType(planet_type).value, PLANET_TYPES['rocky'])


def calculate_planet_mass(radius: float, planet_type: PlanetType) -> float:
    density = _type_data(planet_type)["density"]
    return round_to(math.pow(radius or 1, 3) * density)


def calculate_gravity(mass: float, radius: float) -> float:
    radius_squared = math.pow(radius or 1, 2)
    return round_to(mass / (radius_squared or 1))


def planet_composition(planet_type: PlanetType) -> Composition:
    primary, secondary, trace = _type_data(planet_type)["composition"]
    return Composition(primary=primary, secondary=secondary, trace=trace)


def generate_atmosphere(planet_type: PlanetType, rng: RandomService) -> Atmosphere:
    if planet_type == PlanetType.GAS_GIANT:
        return Atmosphere('extreme', ['hydrogen', 'helium'])
    if planet_type == PlanetType.ICE_GIANT:
        return Atmosphere('extreme', ['methane', 'ammonia', 'water vapor'])
    if planet_type == PlanetType.MOLTEN:
        return Atmosphere('thin' if rng.chance(0.5) else 'none', ['sulfur dioxide', 'carbon dioxide'])
    if planet_type == PlanetType.TERRESTRIAL:
        density = 'moderate' if rng.chance(0.7) else 'thin'
        gases = ['nitrogen', 'oxygen'] if rng.chance(0.5) else ['carbon dioxide', 'nitrogen']
        return Atmosphere(density, gases)
    if planet_type == PlanetType.FROZEN:
        return Atmosphere('thin', ['nitrogen', 'methane'])
    return Atmosphere('thin' if rng.chance(0.3) else 'none', ['carbon dioxide'])


def calculate_planet_temperature(
    luminosity: Optional[float],
    orbit: float,
    atmosphere: Atmosphere,
    rng: RandomService,
) -> int:
    """Temperatura de equilibrio en K más efecto invernadero."""
    if luminosity is None:
        return 100

    base = 278 * math.sqrt(_effective_luminosity(luminosity)) / math.sqrt(orbit or 0.1)
    variation = 30 * (rng.random() - 0.5)

    if atmosphere.density != 'none' and atmosphere.contains('carbon dioxide'):
        greenhouse = 50
    elif atmosphere.density in ('moderate', 'extreme'):
        greenhouse = 20
    else:
        greenhouse = 0
    return math.floor(base + variation + greenhouse)


def determine_water(planet_type: PlanetType, temperature: int, rng: RandomService) -> str:
    if planet_type in (PlanetType.TERRESTRIAL, PlanetType.ICE_GIANT, PlanetType.FROZEN):
        if temperature > 373:
            return 'vapor'
        if temperature > 273:
            return 'liquid' if rng.chance(0.7) else 'ice'
        return 'ice'
    if planet_type == PlanetType.GAS_GIANT and temperature < 300:
        return 'vapor-clouds'
    return 'none'


def generate_moons(planet_type: PlanetType, size: str, rng: RandomService) -> int:
    max_moons = MAX_MOONS_BY_TYPE.get(PlanetType(planet_type).value, DEFAULT_MAX_MOONS)
    if size == 'small':
        max_moons = max(1, max_moons // 3)
    elif size == 'medium':
        max_moons = max(1, max_moons // 2)
    return math.floor(rng.random() * rng.random() * max_moons)


def generate_day_length(planet_type: PlanetType, rng: RandomService) -> float:
    """Duración del día en horas."""
    if planet_type in (PlanetType.TERRESTRIAL, PlanetType.ROCKY):
        hours = 5 + rng.random() * 70
    elif planet_type in (PlanetType.GAS_GIANT, PlanetType.ICE_GIANT):
        hours = 5 + rng.random() * 20
    else:
        hours = 10 + rng.random() * 40
    return round_to(hours, 1)


def calculate_orbital_period(orbit: float) -> float:
    """Tercera ley de Kepler en años terrestres."""
    return round_to(math.sqrt(math.pow(orbit or 0.1, 3)))


def generate_magnetic_field(planet_type: PlanetType, rng: RandomService) -> bool:
    if planet_type in (PlanetType.GAS_GIANT, PlanetType.ICE_GIANT):
        return rng.chance(0.9)
    if planet_type == PlanetType.TERRESTRIAL:
        return rng.chance(0.6)
    return rng.chance(0.3)


def generate_rings(planet_type: PlanetType, rng: RandomService) -> bool:
    if planet_type == PlanetType.GAS_GIANT:
        return rng.chance(0.4)
    if planet_type == PlanetType.ICE_GIANT:
        return rng.chance(0.3)
    return rng.chance(0.05)


def calculate_habitability(
    planet_type: PlanetType,
    temperature: int,
    water: str,
    atmosphere: Atmosphere,
    magnetic_field: bool,
) -> int:
    """Puntaje 0-100. Solo los planetas terrestres puntúan."""
    if planet_type != PlanetType.TERRESTRIAL:
        return 0

    score = 0
    ideal_low, ideal_high, ideal_points = HABITABILITY_TEMP_IDEAL
    tol_low, tol_high, tol_points = HABITABILITY_TEMP_TOLERABLE
    if ideal_low < temperature < ideal_high:
        score += ideal_points
    elif tol_low < temperature < tol_high:
        score += tol_points

    if water == 'liquid':
        score += HABITABILITY_LIQUID_WATER
    if atmosphere.density == 'moderate':
        score += HABITABILITY_MODERATE_ATMOSPHERE
        if atmosphere.contains('oxygen'):
            score += HABITABILITY_OXYGEN
    if magnetic_field:
        score += HABITABILITY_MAGNETIC_FIELD
    return min(score, HABITABILITY_CAP)


def generate_planet_features(planet_type: PlanetType, water: str, rng: RandomService) -> List[str]:
    features = []
    if planet_type == PlanetType.TERRESTRIAL:
        if rng.chance(0.3): features.append('active-volcanoes')
        if rng.chance(0.4) and water == 'liquid': features.append('oceans')
        if rng.chance(0.3): features.append('plate-tectonics')
    if planet_type == PlanetType.GAS_GIANT:
        if rng.chance(0.5): features.append('storms')
        if rng.chance(0.3): features.append('great-spot')
    if rng.chance(0.1): features.append('asteroid-impacts')
    if rng.chance(0.05): features.append('unusual-orbit')
    return features


# --- CIVILIZACIONES ---

def generate_tech_level(rng: RandomService) -> int:
    return rng.randint(1, 10)


def generate_civilization_age(rng: RandomService) -> int:
    """Edad en miles de años."""
    return rng.randint(1, 50)


def traits_conflict(candidate: str, existing: str) -> bool:
    return (
        candidate == existing
        or TRAIT_OPPOSITES.get(candidate) == existing
        or TRAIT_OPPOSITES.get(existing) == candidate
    )


def select_traits(rng: RandomService) -> List[str]:
    """
    Elige de 2 a 4 rasgos sin duplicados ni pares opuestos.
    Tras TRAIT_SELECTION_ATTEMPTS intentos se acepta un conjunto menor.
    """
    target = rng.randint(2, 4)
    selected: List[str] = []
    attempts = 0
    while len(selected) < target and attempts < TRAIT_SELECTION_ATTEMPTS:
        candidate = rng.choice(CIVILIZATION_TRAITS)
        if not any(traits_conflict(candidate, existing) for existing in selected):
            selected.append(candidate)
        attempts += 1
    return selected


def generate_specializations(tech_level: int, rng: RandomService) -> Dict[str, int]:
    count = rng.randint(1, 3)
    specializations: Dict[str, int] = {}
    for _ in range(count):
        spec = rng.choice(SPECIALIZATIONS)
        attempts = 0
        while spec in specializations and attempts < SPECIALIZATION_ATTEMPTS:
            spec = rng.choice(SPECIALIZATIONS)
            attempts += 1
        if spec not in specializations:
            proficiency = tech_level + rng.randint(0, 2) - 1
            specializations[spec] = min(10, max(1, proficiency))
    return specializations


def generate_government(rng: RandomService) -> str:
    return rng.choice(GOVERNMENTS)


def choose_expansion_policy(traits: List[str], rng: RandomService) -> str:
    """Los rasgos sesgan la política; sin sesgo se elige al azar."""
    if 'aggressive' in traits:
        return 'conquest'
    if 'peaceful' in traits:
        return 'diplomacy' if rng.chance(0.7) else 'trade'
    if 'expansionist' in traits:
        return 'colonization' if rng.chance(0.6) else 'conquest'
    if 'xenophobic' in traits:
        return 'infiltration' if rng.chance(0.5) else 'conquest'
    return rng.choice(EXPANSION_POLICIES)
