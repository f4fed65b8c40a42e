# core/entity_factory.py
"""
Fábricas de Entidades.
Construyen Estrellas, Planetas, Civilizaciones y Artefactos a partir del
modelo de atributos. Cualquier error de derivación queda contenido aquí:
se registra y se devuelve un resultado `Failed` en lugar de propagarse.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from core import attribute_model as attrs
from core.exceptions import EntityConstructionError
from core.models import ArtifactType, GalaxyType
from core.spatial_engine import generate_coordinates
from core.world_constants import (
    STAR_MASS_MIN,
    STAR_MASS_MAX,
    ARTIFACT_PROPERTY_TABLES,
    STATION_PURPOSES,
    TRANSPORT_TECHNOLOGIES,
    MEGASTRUCTURE_KINDS,
    CIV_ORBITAL_STATION,
    CIV_TRANSPORT_NETWORK,
    CIV_MEGASTRUCTURE,
)
from core.world_models import Artifact, Civilization, Planet, Star
from core.descriptions import describe_civilization
from utils.logging_utils import log_exception
from utils.name_generator import NameGenerator
from utils.random_utils import RandomService

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Built(Generic[T]):
    """Entidad construida con éxito."""
    entity: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failed:
    """Construcción fallida; `reason` es legible, `error` la causa original."""
    reason: str
    error: Optional[BaseException] = None
    ok: bool = field(default=False, init=False)


FactoryResult = Union[Built[T], Failed]


class EntityFactory:
    """
    Punto único de construcción de entidades.
    Los servicios de azar y nombres se inyectan para que una semilla
    reproduzca la corrida completa.
    """

    def __init__(self, rng: RandomService, names: NameGenerator):
        self.rng = rng
        self.names = names

    # --- ESTRELLAS ---

    def create_star(self, galaxy_type: GalaxyType, radial_seed: float) -> FactoryResult[Star]:
        try:
            rng = self.rng
            star_id = rng.make_id("star")
            name = self.names.star_name()

            mass = attrs.generate_star_mass(rng)
            if not (STAR_MASS_MIN <= mass <= STAR_MASS_MAX):
                raise EntityConstructionError("Masa estelar fuera de rango", {"mass": mass})

            luminosity = attrs.calculate_luminosity(mass)
            temperature = attrs.calculate_star_temperature(mass)
            size = attrs.determine_star_size(mass)
            spectral_type = attrs.determine_spectral_type(temperature)
            age = attrs.generate_star_age(mass, rng)
            rotation = attrs.generate_rotation(rng)
            coordinates = generate_coordinates(galaxy_type, radial_seed, rng)
            is_binary = attrs.determine_if_binary(rng)
            companions = attrs.generate_companions(mass, rng) if is_binary else []
            evolution = attrs.calculate_evolution(mass, age)
            features = attrs.generate_star_features(evolution, spectral_type, rng)

            return Built(Star(
                id=star_id,
                name=name,
                mass=mass,
                luminosity=luminosity,
                temperature=temperature,
                size=size,
                spectral_type=spectral_type,
                age=age,
                rotation=rotation,
                coordinates=coordinates,
                evolution=evolution,
                is_binary=is_binary,
                companions=companions,
                special_features=features,
            ))
        except Exception as e:
            log_exception(e, "create_star", extra_data={"galaxy_type": str(galaxy_type), "radial_seed": radial_seed})
            return Failed(reason=f"star construction failed: {e}", error=e)

    def planet_count_for(self, star: Star) -> int:
        return attrs.planet_count_for(star.evolution, star.spectral_type, star.is_binary, self.rng)

    # --- PLANETAS ---

    def create_planet(self, star: Optional[Star], index: int) -> FactoryResult[Planet]:
        """
        Deriva un planeta en la órbita `index` de `star`.
        El tipo se decide antes que la masa, que depende de la densidad del tipo.
        """
        try:
            if star is None:
                raise EntityConstructionError("Planeta sin estrella anfitriona", {"index": index})

            rng = self.rng
            planet_id = rng.make_id("planet")
            name = self.names.planet_name()

            orbit = attrs.generate_orbit(index, rng)
            size = attrs.generate_planet_size(rng)
            radius = attrs.calculate_planet_radius(size, rng)
            planet_type = attrs.determine_planet_type(orbit, size, star.luminosity, rng)
            mass = attrs.calculate_planet_mass(radius, planet_type)
            gravity = attrs.calculate_gravity(mass, radius)
            composition = attrs.planet_composition(planet_type)
            atmosphere = attrs.generate_atmosphere(planet_type, rng)
            temperature = attrs.calculate_planet_temperature(star.luminosity, orbit, atmosphere, rng)
            water = attrs.determine_water(planet_type, temperature, rng)
            moons = attrs.generate_moons(planet_type, size, rng)
            day_length = attrs.generate_day_length(planet_type, rng)
            orbital_period = attrs.calculate_orbital_period(orbit)
            magnetic_field = attrs.generate_magnetic_field(planet_type, rng)
            rings = attrs.generate_rings(planet_type, rng)
            habitability = attrs.calculate_habitability(planet_type, temperature, water, atmosphere, magnetic_field)
            features = attrs.generate_planet_features(planet_type, water, rng)

            return Built(Planet(
                id=planet_id,
                name=name,
                star_id=star.id,
                index=index,
                orbit=orbit,
                size=size,
                radius=radius,
                mass=mass,
                gravity=gravity,
                type=planet_type,
                composition=composition,
                atmosphere=atmosphere,
                temperature=temperature,
                water=water,
                moons=moons,
                day_length=day_length,
                orbital_period=orbital_period,
                magnetic_field=magnetic_field,
                rings=rings,
                habitability=habitability,
                special_features=features,
            ))
        except Exception as e:
            star_id = star.id if star is not None else None
            log_exception(e, "create_planet", entity_id=star_id, extra_data={"index": index})
            return Failed(reason=f"planet construction failed: {e}", error=e)

    # --- CIVILIZACIONES ---

    def create_civilization(self, home_planet: Optional[Planet]) -> FactoryResult[Civilization]:
        """
        Crea una civilización nativa de `home_planet`.
        El enlace planeta -> civilización lo hace el Universo al registrarla.
        """
        if home_planet is None:
            logger.warning("Civilización solicitada sin planeta natal.")
            return Failed(reason="no home planet")

        try:
            rng = self.rng
            civ_id = rng.make_id("civ")
            name = self.names.civilization_name()
            tech_level = attrs.generate_tech_level(rng)
            age = attrs.generate_civilization_age(rng)
            traits = attrs.select_traits(rng)
            specializations = attrs.generate_specializations(tech_level, rng)
            government = attrs.generate_government(rng)
            policy = attrs.choose_expansion_policy(traits, rng)

            civ = Civilization(
                id=civ_id,
                name=name,
                home_planet_id=home_planet.id,
                technological_level=tech_level,
                age=age,
                traits=traits,
                specializations=specializations,
                government=government,
                expansion_policy=policy,
                planet_ids=[home_planet.id],
            )
            civ.artifacts = self._civilization_artifacts(civ)
            civ.description = describe_civilization(civ)
            return Built(civ)
        except Exception as e:
            log_exception(e, "create_civilization", entity_id=home_planet.id)
            return Failed(reason=f"civilization construction failed: {e}", error=e)

    def _civilization_artifacts(self, civ: Civilization) -> list:
        """Estaciones, redes de transporte y megaestructuras según tecnología."""
        rng = self.rng
        artifacts = []

        min_level, probability = CIV_ORBITAL_STATION
        if civ.technological_level >= min_level and rng.chance(probability):
            artifacts.append(self._artifact(ArtifactType.ORBITAL_STATION, civ.home_planet_id, {
                "size": 'large' if rng.chance(0.3) else 'medium',
                "purpose": rng.choice(STATION_PURPOSES),
            }))

        min_level, probability = CIV_TRANSPORT_NETWORK
        if civ.technological_level >= min_level and rng.chance(probability):
            artifacts.append(self._artifact(ArtifactType.TRANSPORTATION_NETWORK, None, {
                "extent": 'system-wide',
                "technology": rng.choice(TRANSPORT_TECHNOLOGIES),
            }))

        min_level, probability = CIV_MEGASTRUCTURE
        if civ.technological_level >= min_level and rng.chance(probability):
            artifacts.append(self._artifact(ArtifactType.MEGASTRUCTURE, None, {
                "name": self.names.megastructure_name(),
                "structure": rng.choice(MEGASTRUCTURE_KINDS),
                "completion": 'complete' if rng.chance(0.2) else 'partial',
            }))
        return artifacts

    # --- ARTEFACTOS ---

    def _artifact(self, artifact_type: ArtifactType, location_id: Optional[str], properties: Dict[str, Any]) -> Artifact:
        return Artifact(
            id=self.rng.make_id("artifact"),
            type=artifact_type,
            location_id=location_id,
            properties=properties,
        )

    def artifact_properties(self, artifact_type: ArtifactType) -> Dict[str, Any]:
        """Bolsa de propiedades por tipo; colonias y estructuras civiles llegan vacías."""
        rng = self.rng
        table = ARTIFACT_PROPERTY_TABLES.get(artifact_type.value)
        if table is None:
            return {}

        properties: Dict[str, Any] = {}
        if artifact_type == ArtifactType.ANCIENT_RUINS:
            properties["age"] = rng.number(5000, 105000, integer=True)
        elif artifact_type == ArtifactType.DERELICT_STATION:
            properties["age"] = rng.number(500, 10500, integer=True)

        for key, options in table.items():
            properties[key] = rng.choice(options)

        if artifact_type == ArtifactType.ANOMALY:
            properties["danger"] = rng.randint(1, 10)
        return properties

    def create_artifact(
        self,
        artifact_type: Union[ArtifactType, str],
        location: Optional[Planet] = None,
        extra_properties: Optional[Dict[str, Any]] = None,
    ) -> FactoryResult[Artifact]:
        try:
            kind = ArtifactType(artifact_type)
            properties = self.artifact_properties(kind)
            if extra_properties:
                properties.update(extra_properties)
            location_id = location.id if location is not None else None
            return Built(self._artifact(kind, location_id, properties))
        except Exception as e:
            log_exception(e, "create_artifact", entity_id=getattr(location, "id", None),
                          extra_data={"artifact_type": str(artifact_type)})
            return Failed(reason=f"artifact construction failed: {e}", error=e)
