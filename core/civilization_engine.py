# core/civilization_engine.py
"""
Motor de Civilizaciones.
Diplomacia entre pares (simétrica e idempotente) y expansión hacia
sistemas cercanos con creación opcional de colonias.
"""
import logging
from typing import List, Optional

from config.app_constants import (
    EXPANSION_BASE_RANGE,
    EXPANSION_RANGE_PER_TECH,
    EXPANSION_HABITABILITY_THRESHOLD,
    EXPANSION_CHANCE_HIGH,
    EXPANSION_CHANCE_LOW,
    COLONY_ARTIFACT_CHANCE,
)
from core.models import ArtifactType, RelationshipTag
from core.world_constants import TRAIT_OPPOSITES, COLONY_PURPOSES
from core.world_models import Civilization, Planet, Universe
from utils.helpers import calculate_3d_distance
from utils.logging_utils import log_exception
from utils.random_utils import RandomService

logger = logging.getLogger(__name__)


# --- DIPLOMACIA ---

def compatibility_score(traits: List[str], other_traits: List[str]) -> int:
    """+1 por rasgo compartido, -2 por cada par opuesto."""
    score = sum(1 for trait in traits if trait in other_traits)
    for trait in traits:
        opposite = TRAIT_OPPOSITES.get(trait)
        if opposite and opposite in other_traits:
            score -= 2
    return score


def classify_relationship(civ: Civilization, other: Civilization) -> RelationshipTag:
    if (
        'xenophobic' in civ.traits
        or 'xenophobic' in other.traits
        or ('aggressive' in civ.traits and 'aggressive' in other.traits)
    ):
        return RelationshipTag.HOSTILE

    score = compatibility_score(civ.traits, other.traits)
    if score > 1:
        tag = RelationshipTag.ALLIANCE
    elif score > 0:
        tag = RelationshipTag.FRIENDLY
    elif score == 0:
        tag = RelationshipTag.NEUTRAL
    elif score > -3:
        tag = RelationshipTag.TENSE
    else:
        tag = RelationshipTag.HOSTILE

    xenophilic = 'xenophilic' in civ.traits or 'xenophilic' in other.traits
    if xenophilic and tag in (RelationshipTag.NEUTRAL, RelationshipTag.TENSE):
        tag = RelationshipTag.FRIENDLY
    return tag


def establish_relationship(civ: Civilization, other: Optional[Civilization]) -> Optional[RelationshipTag]:
    """
    Fija la relación entre dos civilizaciones en ambos sentidos.
    Si alguna de las dos ya la conoce, se reutiliza sin recalcular.
    """
    if other is None or other.id == civ.id:
        return None

    existing = civ.relationships.get(other.id) or other.relationships.get(civ.id)
    if existing is None:
        existing = classify_relationship(civ, other)

    civ.relationships[other.id] = existing
    other.relationships[civ.id] = existing
    return existing


def establish_all_relationships(civilizations: List[Civilization]) -> int:
    """Recorre cada par no ordenado una vez. Devuelve la cantidad de pares."""
    pairs = 0
    for i, civ in enumerate(civilizations):
        for other in civilizations[i + 1:]:
            try:
                if establish_relationship(civ, other) is not None:
                    pairs += 1
            except Exception as e:
                log_exception(e, "establish_relationship", entity_id=civ.id, extra_data={"other": other.id})
    return pairs


# --- EXPANSIÓN ---

def expansion_radius(civ: Civilization) -> float:
    return EXPANSION_BASE_RANGE + civ.technological_level * EXPANSION_RANGE_PER_TECH


def expand_to(universe: Universe, civ: Civilization, planet: Optional[Planet], factory, rng: RandomService) -> bool:
    """
    Coloniza `planet` para `civ`.
    Rechaza planetas ya propios o de otra civilización. Con 70% de
    probabilidad deja una colonia si el planeta tiene espacio.
    """
    if planet is None or civ.owns(planet.id):
        return False
    if planet.civilization_id is not None and planet.civilization_id != civ.id:
        owner = universe.get_civilization(planet.civilization_id)
        owner_name = owner.name if owner else planet.civilization_id
        logger.warning(f"{civ.name} no puede expandirse a {planet.name}: ya colonizado por {owner_name}")
        return False

    civ.planet_ids.append(planet.id)
    planet.civilization_id = civ.id

    if rng.chance(COLONY_ARTIFACT_CHANCE):
        extra = {
            "owner": civ.id,
            "purpose": rng.choice(COLONY_PURPOSES),
            "population": rng.number(1000, 1_001_000, integer=True),
            "age": rng.number(0, civ.age, integer=True),
        }
        result = factory.create_artifact(ArtifactType.COLONY, planet, extra)
        if result.ok and not planet.add_artifact(result.entity):
            logger.debug(f"Colonia omitida en {planet.name}: máximo de artefactos alcanzado")
    return True


def expand_civilization(universe: Universe, civ: Civilization, factory, rng: RandomService) -> int:
    """
    Intenta colonizar planetas deshabitados de estrellas dentro del radio
    de expansión. Devuelve cuántos planetas se incorporaron.
    """
    home_star = universe.home_star_of(civ)
    if home_star is None:
        logger.warning(f"Civilización {civ.id} sin estrella natal resoluble; no se expande.")
        return 0

    radius = expansion_radius(civ)
    colonized = 0
    for star in universe.stars:
        if star.id == home_star.id:
            continue
        if calculate_3d_distance(home_star.coordinates, star.coordinates) >= radius:
            continue
        for planet in star.planets:
            if planet.is_inhabited:
                continue
            chance = EXPANSION_CHANCE_HIGH if planet.habitability > EXPANSION_HABITABILITY_THRESHOLD else EXPANSION_CHANCE_LOW
            if not rng.chance(chance):
                continue
            try:
                if expand_to(universe, civ, planet, factory, rng):
                    colonized += 1
            except Exception as e:
                log_exception(e, "expand_to", entity_id=civ.id, extra_data={"planet": planet.id})
    return colonized
