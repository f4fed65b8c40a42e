# core/models.py
"""
Modelos de Dominio Tipados.
Enums compartidos por todo el pipeline y esquemas Pydantic para los dos
bordes del sistema: opciones de generación (entrada) y grafo de nodos/enlaces
(salida hacia la capa de render).
"""

from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator
from enum import Enum

from config.app_constants import (
    DEFAULT_GALAXY_TYPE,
    DEFAULT_STAR_COUNT,
    DEFAULT_CIV_PROBABILITY,
)

# --- ENUMS ---

class GalaxyType(str, Enum):
    """Topologías de galaxia soportadas."""
    SPIRAL = "spiral"
    ELLIPTICAL = "elliptical"
    IRREGULAR = "irregular"
    TEST = "test"


class StellarEvolution(str, Enum):
    """Fase del ciclo de vida estelar."""
    PROTOSTAR = "protostar"
    MAIN_SEQUENCE = "main-sequence"
    RED_GIANT = "red-giant"
    RED_SUPERGIANT = "red-supergiant"
    SUPERNOVA_IMMINENT = "supernova-imminent"
    WHITE_DWARF = "white-dwarf"
    NEUTRON_STAR = "neutron-star"
    BLACK_HOLE = "black-hole"


class PlanetType(str, Enum):
    MOLTEN = "molten"
    ROCKY = "rocky"
    TERRESTRIAL = "terrestrial"
    GAS_GIANT = "gas-giant"
    ICE_GIANT = "ice-giant"
    FROZEN = "frozen"


class ArtifactType(str, Enum):
    ANCIENT_RUINS = "ancient-ruins"
    DERELICT_STATION = "derelict-station"
    ANOMALY = "anomaly"
    COLONY = "colony"
    MEGASTRUCTURE = "megastructure"
    ORBITAL_STATION = "orbital-station"
    TRANSPORTATION_NETWORK = "transportation-network"


class RelationshipTag(str, Enum):
    """Estado diplomático entre dos civilizaciones (simétrico)."""
    ALLIANCE = "alliance"
    FRIENDLY = "friendly"
    NEUTRAL = "neutral"
    TENSE = "tense"
    HOSTILE = "hostile"


class NodeType(str, Enum):
    STAR = "star"
    COMPANION_STAR = "companion-star"
    PLANET = "planet"
    MEGASTRUCTURE = "megastructure"
    CIVILIZATION = "civilization"


# --- OPCIONES DE GENERACIÓN ---

class GenerationOptions(BaseModel):
    """
    Parámetros elegidos por el usuario.
    Acepta tanto snake_case como las claves camelCase del cliente web
    (galaxyType, starCount, civProbability).
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    galaxy_type: GalaxyType = Field(default=GalaxyType(DEFAULT_GALAXY_TYPE), alias="galaxyType")
    star_count: int = Field(default=DEFAULT_STAR_COUNT, ge=1, alias="starCount")
    civ_probability: float = Field(default=DEFAULT_CIV_PROBABILITY, ge=0.0, le=1.0, alias="civProbability")

    @field_validator('galaxy_type', mode='before')
    @classmethod
    def normalize_galaxy_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> 'GenerationOptions':
        return cls.model_validate(data or {})


# --- GRAFO DE RENDER ---

class GraphNode(BaseModel):
    """Nodo desnormalizado. `properties_ref` apunta al id del registro de origen."""
    id: str
    name: str
    type: NodeType
    val: float = Field(default=1.0, description="Sugerencia de tamaño para el render.")
    color: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    properties_ref: Optional[str] = Field(default=None, serialization_alias="propertiesRef")


class GraphLink(BaseModel):
    source: str
    target: str
    color: str
    width: float = 0.1
    dashed: bool = False


class GalaxyGraph(BaseModel):
    """Salida completa de la proyección: lo único que consume el render."""
    nodes: List[GraphNode] = Field(default_factory=list)
    links: List[GraphLink] = Field(default_factory=list)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def nodes_of_type(self, node_type: NodeType) -> List[GraphNode]:
        return [n for n in self.nodes if n.type == node_type]
