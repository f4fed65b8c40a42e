# core/world_models.py
"""
Modelos de datos del universo generado.
Define la jerarquía Universo -> Estrellas -> Planetas -> Artefactos y las
Civilizaciones que los habitan.
Las referencias hacia arriba (planeta -> estrella, planeta -> civilización)
son ids que se resuelven a través del Universo, nunca objetos vivos.
"""
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Dict, Any, Iterator, Mapping, Optional

from config.app_constants import MAX_ARTIFACTS_PER_PLANET, HABITABLE_THRESHOLD
from core.models import (
    ArtifactType,
    GalaxyType,
    PlanetType,
    RelationshipTag,
    StellarEvolution,
)


@dataclass
class Coordinates:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.z))


@dataclass
class Companion:
    """Estrella compañera de un sistema binario."""
    mass: float
    spectral_type: str
    orbit_distance: float
    orbital_period: float


@dataclass
class Composition:
    primary: str
    secondary: str
    trace: str


@dataclass
class Atmosphere:
    density: str  # 'none', 'thin', 'moderate', 'extreme'
    composition: List[str] = field(default_factory=list)

    def contains(self, gas: str) -> bool:
        return gas in self.composition


@dataclass(frozen=True)
class Artifact:
    """
    Objeto inmutable: se crea durante la generación y nunca se modifica.
    location_id es el id del planeta donde se encuentra (o None).
    `properties` se copia y queda de solo lectura.
    """
    id: str
    type: ArtifactType
    location_id: Optional[str] = None
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def name(self) -> Optional[str]:
        return self.properties.get("name")


@dataclass
class Planet:
    id: str
    name: str
    star_id: str
    index: int
    orbit: float
    size: str  # 'small', 'medium', 'large'
    radius: float
    mass: float
    gravity: float
    type: PlanetType
    composition: Composition
    atmosphere: Atmosphere
    temperature: int
    water: str
    moons: int
    day_length: float
    orbital_period: float
    magnetic_field: bool
    rings: bool
    habitability: int = 0
    special_features: List[str] = field(default_factory=list)

    # Referencia débil a la civilización que lo habita
    civilization_id: Optional[str] = None
    artifacts: List[Artifact] = field(default_factory=list)

    @property
    def is_inhabited(self) -> bool:
        return self.civilization_id is not None

    @property
    def is_habitable(self) -> bool:
        return self.habitability > HABITABLE_THRESHOLD

    def has_artifact_room(self) -> bool:
        return len(self.artifacts) < MAX_ARTIFACTS_PER_PLANET

    def add_artifact(self, artifact: Artifact) -> bool:
        """Adjunta un artefacto respetando el máximo por planeta."""
        if not self.has_artifact_room():
            return False
        self.artifacts.append(artifact)
        return True


@dataclass
class Star:
    id: str
    name: str
    mass: float
    luminosity: float
    temperature: int
    size: str  # 'dwarf', 'medium', 'giant', 'supergiant'
    spectral_type: str  # O, B, A, F, G, K, M
    age: float  # Gyr
    rotation: float  # días
    coordinates: Coordinates
    evolution: StellarEvolution
    is_binary: bool = False
    companions: List[Companion] = field(default_factory=list)
    special_features: List[str] = field(default_factory=list)
    planets: List[Planet] = field(default_factory=list)


@dataclass
class Civilization:
    id: str
    name: str
    home_planet_id: str
    technological_level: int
    age: int  # miles de años
    traits: List[str]
    specializations: Dict[str, int]
    government: str
    expansion_policy: str
    planet_ids: List[str] = field(default_factory=list)
    relationships: Dict[str, RelationshipTag] = field(default_factory=dict)
    artifacts: List[Artifact] = field(default_factory=list)
    description: Optional[str] = None

    def owns(self, planet_id: str) -> bool:
        return planet_id in self.planet_ids


@dataclass
class UniverseMetadata:
    galaxy_type: GalaxyType
    generated_date: str
    star_count: int = 0
    planet_count: int = 0
    civilization_count: int = 0
    habitable_planets: int = 0


@dataclass
class Universe:
    """
    Agregado raíz de una corrida.
    Mantiene índices por id para resolver referencias sin ciclos de objetos.
    """
    metadata: UniverseMetadata
    stars: List[Star] = field(default_factory=list)
    civilizations: List[Civilization] = field(default_factory=list)

    _stars_by_id: Dict[str, Star] = field(default_factory=dict, init=False, repr=False)
    _planets_by_id: Dict[str, Planet] = field(default_factory=dict, init=False, repr=False)
    _civs_by_id: Dict[str, Civilization] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        # Indexar lo recibido en el constructor
        for star in self.stars:
            self._stars_by_id[star.id] = star
            for planet in star.planets:
                self._planets_by_id[planet.id] = planet
        for civ in self.civilizations:
            self._civs_by_id[civ.id] = civ

    # --- Registro ---

    def add_star(self, star: Star) -> None:
        self.stars.append(star)
        self._stars_by_id[star.id] = star
        for planet in star.planets:
            self._planets_by_id[planet.id] = planet

    def attach_planet(self, star: Star, planet: Planet) -> None:
        star.planets.append(planet)
        self._planets_by_id[planet.id] = planet

    def add_civilization(self, civ: Civilization) -> None:
        """Registra la civilización y enlaza su planeta natal."""
        self.civilizations.append(civ)
        self._civs_by_id[civ.id] = civ
        home = self._planets_by_id.get(civ.home_planet_id)
        if home is not None:
            home.civilization_id = civ.id
        if civ.home_planet_id not in civ.planet_ids:
            civ.planet_ids.insert(0, civ.home_planet_id)

    # --- Resolución de referencias ---

    def get_star(self, star_id: str) -> Optional[Star]:
        return self._stars_by_id.get(star_id)

    def get_planet(self, planet_id: Optional[str]) -> Optional[Planet]:
        if planet_id is None:
            return None
        return self._planets_by_id.get(planet_id)

    def get_civilization(self, civ_id: Optional[str]) -> Optional[Civilization]:
        if civ_id is None:
            return None
        return self._civs_by_id.get(civ_id)

    def star_of(self, planet: Planet) -> Optional[Star]:
        return self._stars_by_id.get(planet.star_id)

    def home_star_of(self, civ: Civilization) -> Optional[Star]:
        home = self.get_planet(civ.home_planet_id)
        return self.star_of(home) if home else None

    # --- Consultas ---

    def iter_planets(self) -> Iterator[Planet]:
        for star in self.stars:
            yield from star.planets

    @property
    def planet_count(self) -> int:
        return sum(len(s.planets) for s in self.stars)

    @property
    def habitable_planet_count(self) -> int:
        return sum(1 for p in self.iter_planets() if p.is_habitable)

    def refresh_metadata(self) -> UniverseMetadata:
        """Recalcula los contadores agregados (etapa de finalización)."""
        self.metadata.star_count = len(self.stars)
        self.metadata.planet_count = self.planet_count
        self.metadata.civilization_count = len(self.civilizations)
        self.metadata.habitable_planets = self.habitable_planet_count
        return self.metadata
