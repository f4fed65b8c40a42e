# core/descriptions.py
"""
Textos descriptivos para civilizaciones y resumen de una corrida.
Generación procedural pura (sin IA).
"""
from typing import List

from core.world_constants import EXPANSION_POLICY_DESCRIPTIONS
from core.world_models import Civilization, Universe
from utils.helpers import capitalize_words, indefinite_article
from utils.logging_utils import safe_operation


@safe_operation("describe_civilization", default_return="No civilization data available.")
def describe_civilization(civ: Civilization) -> str:
    """
    Descripción en prosa: gobierno, edad, tecnología, rasgos,
    política de expansión y especializaciones.
    """
    if civ is None:
        return "No civilization data available."

    parts: List[str] = []
    government = civ.government or 'unknown entity'
    parts.append(
        f"The {civ.name or 'Unnamed Civilization'} are "
        f"{indefinite_article(government)} {government.replace('-', ' ')}."
    )

    age = civ.age if civ.age else 'an unknown number of'
    tech = civ.technological_level if civ.technological_level else '?'
    parts.append(
        f"Having existed for approximately {age} thousand years, "
        f"they have reached technology level {tech}."
    )

    if civ.traits:
        parts.append(f"They are known for being {' and '.join(civ.traits)}.")
    else:
        parts.append("Their defining traits are unknown.")

    if civ.expansion_policy:
        parts.append(EXPANSION_POLICY_DESCRIPTIONS.get(
            civ.expansion_policy,
            f"Their expansion policy is {civ.expansion_policy}.",
        ))

    if civ.specializations:
        parts.append(f"They show particular aptitude in {', '.join(civ.specializations)}.")

    return " ".join(parts)


def summarize_universe(universe: Universe) -> str:
    """Resumen multilínea para la CLI."""
    meta = universe.metadata
    lines = [
        f"Galaxy type: {meta.galaxy_type.value}",
        f"Generated: {meta.generated_date}",
        f"Stars: {meta.star_count}",
        f"Planets: {meta.planet_count} ({meta.habitable_planets} habitable)",
        f"Civilizations: {meta.civilization_count}",
    ]
    for civ in universe.civilizations:
        lines.append(f"  - {civ.name}: level {civ.technological_level}, {len(civ.planet_ids)} planet(s), {capitalize_words(civ.government)}")
    return "\n".join(lines)
