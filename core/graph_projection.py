# core/graph_projection.py
"""
Proyección a Grafo.
Recorre un Universo terminado y emite la estructura {nodes, links} que
consume la capa de render. Transformación pura sobre el universo: los
errores de una entidad se registran y esa entidad se omite.
"""
import logging
import math
from typing import Dict, List, Optional

from core.exceptions import ProjectionError
from core.models import ArtifactType, GalaxyGraph, GraphLink, GraphNode, NodeType, PlanetType
from core.world_constants import (
    SPECTRAL_TYPES,
    PLANET_TYPES,
    DEFAULT_STAR_COLOR,
    DEFAULT_PLANET_COLOR,
    EVOLUTION_COLORS,
    INHABITED_PLANET_COLOR,
    HABITABLE_PLANET_COLOR,
    CIVILIZATION_COLOR,
    COLONY_LINK_COLOR,
    COMPANION_LINK_COLOR,
    PLANET_LINK_COLOR,
    MEGASTRUCTURE_COLOR,
    RELATIONSHIP_COLORS,
    DEFAULT_LINK_COLOR,
)
from core.world_models import Civilization, Planet, Star, Universe
from utils.logging_utils import log_exception
from utils.random_utils import RandomService

logger = logging.getLogger(__name__)

ORBIT_SCALE = 8
COMPANION_DISTANCE_SCALE = 0.2
CIVILIZATION_JITTER = 3


def star_color(star: Star) -> str:
    color = SPECTRAL_TYPES.get(star.spectral_type, {}).get("color", DEFAULT_STAR_COLOR)
    return EVOLUTION_COLORS.get(star.evolution.value, color)


def planet_color(planet: Planet) -> str:
    if planet.is_inhabited:
        return INHABITED_PLANET_COLOR
    if planet.type == PlanetType.TERRESTRIAL and planet.is_habitable:
        return HABITABLE_PLANET_COLOR
    return PLANET_TYPES.get(planet.type.value, {}).get("color", DEFAULT_PLANET_COLOR)


class GraphProjector:
    """Acumula nodos y enlaces; una instancia por proyección."""

    def __init__(self, universe: Universe, rng: Optional[RandomService] = None):
        self.universe = universe
        self.rng = rng or RandomService()
        self.nodes: List[GraphNode] = []
        self.links: List[GraphLink] = []
        self._index: Dict[str, GraphNode] = {}

    def _commit(self, nodes: List[GraphNode], links: List[GraphLink]) -> None:
        for node in nodes:
            self.nodes.append(node)
            self._index[node.id] = node
        self.links.extend(links)

    def _angle(self) -> float:
        return self.rng.random() * 2 * math.pi

    # --- Estrellas y sus sistemas ---

    def _star_nodes(self, star: Star) -> None:
        if star.coordinates is None or not star.coordinates.is_finite():
            raise ProjectionError("Coordenadas inválidas", {"star": star.id})

        nodes: List[GraphNode] = []
        links: List[GraphLink] = []
        c = star.coordinates
        nodes.append(GraphNode(
            id=star.id, name=star.name, type=NodeType.STAR,
            val=max(1, (star.mass or 1) * 2), color=star_color(star),
            x=c.x, y=c.y, z=c.z, properties_ref=star.id,
        ))

        for i, companion in enumerate(star.companions):
            companion_id = f"companion-{star.id}-{i}"
            angle = self._angle()
            distance = (companion.orbit_distance or 10) * COMPANION_DISTANCE_SCALE
            nodes.append(GraphNode(
                id=companion_id, name=f"{star.name} Companion {i + 1}", type=NodeType.COMPANION_STAR,
                val=max(1, (companion.mass or 1) * 2),
                color=SPECTRAL_TYPES.get(companion.spectral_type, {}).get("color", DEFAULT_STAR_COLOR),
                x=c.x + math.cos(angle) * distance,
                y=c.y + math.sin(angle) * distance,
                z=c.z + (self.rng.random() - 0.5) * distance * 0.5,
                properties_ref=star.id,
            ))
            links.append(GraphLink(source=star.id, target=companion_id, color=COMPANION_LINK_COLOR, width=0.1))

        self._commit(nodes, links)

        for planet in star.planets:
            try:
                self._planet_nodes(star, planet)
            except Exception as e:
                log_exception(e, "project_planet", entity_id=planet.id)

    def _planet_nodes(self, star: Star, planet: Planet) -> None:
        nodes: List[GraphNode] = []
        links: List[GraphLink] = []
        c = star.coordinates
        angle = self._angle()
        orbit_radius = math.log10(planet.orbit + 1) * ORBIT_SCALE
        planar_offset = (self.rng.random() - 0.5) * orbit_radius * 0.1

        planet_node = GraphNode(
            id=planet.id, name=planet.name, type=NodeType.PLANET,
            val=max(1, (planet.radius or 1) * 1.5), color=planet_color(planet),
            x=c.x + math.cos(angle) * orbit_radius,
            y=c.y + math.sin(angle) * orbit_radius,
            z=c.z + planar_offset,
            properties_ref=planet.id,
        )
        nodes.append(planet_node)
        links.append(GraphLink(source=star.id, target=planet.id, color=PLANET_LINK_COLOR, width=0.1))

        for i, artifact in enumerate(planet.artifacts):
            if artifact.type != ArtifactType.MEGASTRUCTURE:
                continue
            structure_id = f"megastructure-{planet.id}-{i}"
            structure_angle = self._angle()
            radius = (planet.radius or 1) * 0.5
            nodes.append(GraphNode(
                id=structure_id, name=artifact.name or "Megastructure", type=NodeType.MEGASTRUCTURE,
                val=4, color=MEGASTRUCTURE_COLOR,
                x=planet_node.x + math.cos(structure_angle) * radius,
                y=planet_node.y + math.sin(structure_angle) * radius,
                z=planet_node.z + (self.rng.random() - 0.5) * radius * 0.5,
                properties_ref=artifact.id,
            ))
            links.append(GraphLink(source=planet.id, target=structure_id, color=MEGASTRUCTURE_COLOR, width=0.1, dashed=True))

        self._commit(nodes, links)

    # --- Civilizaciones ---

    def _civilization_node(self, civ: Civilization) -> None:
        home_node = self._index.get(civ.home_planet_id)
        if home_node is None:
            logger.warning(f"Nodo del planeta natal no encontrado para la civilización: {civ.name}")
            return

        jitter = CIVILIZATION_JITTER
        node = GraphNode(
            id=civ.id, name=civ.name, type=NodeType.CIVILIZATION,
            val=5, color=CIVILIZATION_COLOR,
            x=home_node.x + (self.rng.random() - 0.5) * jitter,
            y=home_node.y + (self.rng.random() - 0.5) * jitter,
            z=home_node.z + (self.rng.random() - 0.5) * jitter,
            properties_ref=civ.id,
        )
        link = GraphLink(source=civ.id, target=home_node.id, color=INHABITED_PLANET_COLOR, width=0.2)
        self._commit([node], [link])

    def _civilization_links(self, civ: Civilization) -> None:
        links: List[GraphLink] = []
        for planet_id in civ.planet_ids:
            if planet_id == civ.home_planet_id:
                continue
            if planet_id not in self._index:
                logger.warning(f"Planeta colonizado {planet_id} de {civ.name} sin nodo; se omite.")
                continue
            links.append(GraphLink(source=civ.id, target=planet_id, color=COLONY_LINK_COLOR, width=0.1, dashed=True))

        for other_id, relationship in civ.relationships.items():
            # Cada par se emite una sola vez, desde el id menor
            if not civ.id < other_id:
                continue
            if self.universe.get_civilization(other_id) is None or other_id not in self._index:
                logger.warning(f"Relación de {civ.name} con civilización desconocida {other_id}; se omite.")
                continue
            tag = getattr(relationship, "value", relationship)
            links.append(GraphLink(
                source=civ.id, target=other_id,
                color=RELATIONSHIP_COLORS.get(tag, DEFAULT_LINK_COLOR), width=0.3, dashed=True,
            ))
        self._commit([], links)

    # --- Recorrido completo ---

    def project(self) -> GalaxyGraph:
        for star in self.universe.stars:
            try:
                self._star_nodes(star)
            except Exception as e:
                log_exception(e, "project_star", entity_id=getattr(star, "id", None))

        for civ in self.universe.civilizations:
            try:
                self._civilization_node(civ)
            except Exception as e:
                log_exception(e, "project_civilization", entity_id=getattr(civ, "id", None))

        for civ in self.universe.civilizations:
            if civ.id not in self._index:
                continue
            try:
                self._civilization_links(civ)
            except Exception as e:
                log_exception(e, "project_civilization_links", entity_id=civ.id)

        logger.info(f"Proyección: {len(self.nodes)} nodos y {len(self.links)} enlaces.")
        return GalaxyGraph(nodes=self.nodes, links=self.links)


def project_universe(universe: Optional[Universe], rng: Optional[RandomService] = None) -> GalaxyGraph:
    """
    Convierte un Universo en {nodes, links}.
    Nunca lanza: un universo ausente produce un grafo vacío.
    """
    if universe is None or getattr(universe, "stars", None) is None:
        logger.error("No se puede proyectar: universo inválido.")
        return GalaxyGraph()
    return GraphProjector(universe, rng).project()
