# core/galaxy_generator.py
"""
Orquestador del pipeline de generación.
Seis etapas secuenciales sobre un único Universo mutable:
estrellas -> planetas -> civilizaciones -> relaciones -> expansión ->
artefactos, y una finalización que calcula los metadatos.
Cada etapa aporta una porción fija de la barra de progreso 0-100.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from config.app_constants import (
    MAX_STARS,
    MAX_CIVILIZATIONS,
    EXPANSION_BATCH_SIZE,
    TEST_STAR_COUNT,
    TEST_RADIAL_SEED,
    PROGRESS_STARS,
    PROGRESS_PLANETS,
    PROGRESS_CIVILIZATIONS,
    PROGRESS_RELATIONSHIPS,
    PROGRESS_EXPANSION,
    PROGRESS_ARTIFACTS,
    PROGRESS_FINALIZE,
    PROGRESS_CEILING,
    HABITABLE_THRESHOLD,
    CIV_CANDIDATE_POOL_FACTOR,
    ARTIFACT_STAR_RATIO,
    COLONIZED_ARTIFACT_CHANCE,
)
from config.settings import GENERATION_BATCH_SIZE
from core.batch_scheduler import run_batched
from core.civilization_engine import establish_all_relationships, expand_civilization
from core.entity_factory import EntityFactory
from core.exceptions import GenerationSetupError
from core.models import GalaxyType, GenerationOptions
from core.world_constants import STANDALONE_ARTIFACT_TYPES
from core.world_models import Planet, Star, Universe, UniverseMetadata
from utils.logging_utils import log_exception
from utils.name_generator import NameGenerator
from utils.random_utils import RandomService

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], Any]
StageRange = Tuple[float, float]


def max_civilizations_for(candidate_count: int, civ_probability: float) -> int:
    """Tope de civilizaciones para una corrida; 0 si la probabilidad es 0."""
    if civ_probability <= 0:
        return 0
    return min(max(1, math.ceil(candidate_count * civ_probability)), MAX_CIVILIZATIONS)


class GalaxyGenerator:
    """
    Ejecuta una corrida completa. Una instancia por corrida.

    Los servicios de azar y nombres se inyectan; el generador no toca
    estado global y una misma semilla produce el mismo universo.
    """

    def __init__(
        self,
        options: GenerationOptions,
        rng: Optional[RandomService],
        names: Optional[NameGenerator],
        batch_size: int = GENERATION_BATCH_SIZE,
    ):
        self.options = options
        self.rng = rng
        self.names = names
        self.batch_size = batch_size
        self.factory: Optional[EntityFactory] = None
        self.universe: Optional[Universe] = None
        self.target_star_count = 0

        self._progress_callback: Optional[ProgressCallback] = None
        self._progress = 0.0

    # --- PROGRESO ---

    def _emit(self, percent: float, message: str) -> None:
        if self._progress_callback is None:
            return
        try:
            self._progress_callback(percent, message)
        except Exception as e:
            log_exception(e, "progress_callback", extra_data={"percent": percent})

    def _report(self, percent: float, message: str) -> None:
        """Progreso monótono y recortado a PROGRESS_CEILING hasta finalizar."""
        self._progress = max(self._progress, min(percent, PROGRESS_CEILING))
        self._emit(self._progress, message)

    def _stage_reporter(self, stage: StageRange, label: str) -> Callable[[float, int, int], None]:
        start, end = stage

        def report(percent_complete: float, done: int, total: int) -> None:
            self._report(start + (end - start) * percent_complete / 100, f"{label}: {math.floor(percent_complete)}%")
        return report

    # --- CONFIGURACIÓN ---

    def _check_setup(self) -> None:
        missing = [name for name, service in (("rng", self.rng), ("names", self.names)) if service is None]
        if missing:
            raise GenerationSetupError("Faltan servicios requeridos", {"missing": missing})
        if not isinstance(self.options, GenerationOptions):
            raise GenerationSetupError("Opciones de generación inválidas", {"options": repr(self.options)})
        if self.batch_size < 1:
            raise GenerationSetupError("Tamaño de lote inválido", {"batch_size": self.batch_size})

    def _new_universe(self, galaxy_type: GalaxyType) -> Universe:
        return Universe(metadata=UniverseMetadata(
            galaxy_type=galaxy_type,
            generated_date=datetime.now(timezone.utc).isoformat(),
        ))

    def _resolve_star_target(self) -> int:
        requested = self.options.star_count
        if requested > MAX_STARS:
            logger.warning(f"Se solicitaron {requested} estrellas; se limita a {MAX_STARS}.")
        return min(requested, MAX_STARS)

    # --- PUNTO DE ENTRADA ---

    async def generate(self, progress_callback: Optional[ProgressCallback] = None) -> Universe:
        """
        Corre el pipeline completo y devuelve el Universo.

        Raises:
            GenerationSetupError: si faltan servicios u opciones válidas.
            Cualquier otro error del flujo del orquestador se propaga tal cual,
            luego de un último reporte de progreso (100, "Error: ...").
        """
        self._progress_callback = progress_callback
        self._progress = 0.0

        try:
            self._check_setup()
        except GenerationSetupError as e:
            logger.error(f"No se puede iniciar la generación: {e}")
            self._emit(100, e.report_message)
            raise

        self.factory = EntityFactory(self.rng, self.names)

        try:
            if self.options.galaxy_type == GalaxyType.TEST:
                return self._generate_test_universe()
            return await self._run_pipeline()
        except Exception as e:
            logger.critical(f"Fallo durante la generación: {e}", exc_info=True)
            self._emit(100, f"Error: {e}")
            raise

    async def _run_pipeline(self) -> Universe:
        galaxy_type = self.options.galaxy_type
        logger.info(
            f"Iniciando generación: tipo={galaxy_type.value} "
            f"estrellas={self.options.star_count} civ_prob={self.options.civ_probability}"
        )
        self.universe = self._new_universe(galaxy_type)
        self.target_star_count = self._resolve_star_target()

        await self._generate_stars()
        await self._generate_planets()
        await self._seed_civilizations()
        self._establish_relationships()
        await self._expand_civilizations()
        await self._place_artifacts()
        return self._finalize()

    # --- ETAPA 1: ESTRELLAS ---

    async def _generate_stars(self) -> None:
        universe = self.universe
        target = self.target_star_count
        self._report(PROGRESS_STARS[0], "Creating stars...")

        def create(_, index: int) -> None:
            radial_seed = self.rng.number(0.1, 1.0)
            result = self.factory.create_star(self.options.galaxy_type, radial_seed)
            if result.ok:
                universe.add_star(result.entity)
            else:
                logger.warning(f"Estrella {index} descartada: {result.reason}")

        await run_batched([None] * target, create, self.batch_size, self._stage_reporter(PROGRESS_STARS, "Creating stars"))
        logger.info(f"Etapa estrellas: {len(universe.stars)}/{target} válidas")

    # --- ETAPA 2: PLANETAS ---

    def _populate_star(self, star: Star, planet_count: int) -> None:
        for index in range(planet_count):
            result = self.factory.create_planet(star, index)
            if result.ok:
                self.universe.attach_planet(star, result.entity)

    async def _generate_planets(self) -> None:
        self._report(PROGRESS_PLANETS[0], "Creating planetary systems...")

        def populate(star: Star, _index: int) -> None:
            self._populate_star(star, self.factory.planet_count_for(star))

        await run_batched(
            list(self.universe.stars), populate, self.batch_size,
            self._stage_reporter(PROGRESS_PLANETS, "Creating planets"),
        )
        logger.info(f"Etapa planetas: {self.universe.planet_count} planetas")

    # --- ETAPA 3: CIVILIZACIONES ---

    def civilization_candidates(self) -> List[Planet]:
        """Planetas habitables sin civilización, de mayor a menor habitabilidad."""
        candidates = [
            p for p in self.universe.iter_planets()
            if p.habitability > HABITABLE_THRESHOLD and not p.is_inhabited
        ]
        candidates.sort(key=lambda p: p.habitability, reverse=True)
        return candidates

    async def _seed_civilizations(self) -> None:
        self._report(PROGRESS_CIVILIZATIONS[0], "Identifying habitable planets...")
        universe = self.universe
        probability = self.options.civ_probability

        candidates = self.civilization_candidates()
        max_civs = max_civilizations_for(len(candidates), probability)
        pool = candidates[:max_civs * CIV_CANDIDATE_POOL_FACTOR]

        def seed(planet: Planet, _index: int) -> None:
            if len(universe.civilizations) >= max_civs:
                return
            if self.rng.chance(probability) and not planet.is_inhabited:
                result = self.factory.create_civilization(planet)
                if result.ok:
                    universe.add_civilization(result.entity)

        await run_batched(pool, seed, self.batch_size, self._stage_reporter(PROGRESS_CIVILIZATIONS, "Seeding civilizations"))
        self._report(PROGRESS_CIVILIZATIONS[1], f"Created {len(universe.civilizations)} civilizations")
        logger.info(f"Etapa civilizaciones: {len(universe.civilizations)} de {len(candidates)} candidatos")

    # --- ETAPA 4: RELACIONES ---

    def _establish_relationships(self) -> None:
        self._report(PROGRESS_RELATIONSHIPS[0], "Establishing relationships...")
        pairs = establish_all_relationships(self.universe.civilizations)
        self._report(PROGRESS_RELATIONSHIPS[1], "Relationships established")
        logger.info(f"Etapa relaciones: {pairs} pares")

    # --- ETAPA 5: EXPANSIÓN ---

    async def _expand_civilizations(self) -> None:
        self._report(PROGRESS_EXPANSION[0], "Expanding civilizations...")
        universe = self.universe

        def expand(civ, _index: int) -> None:
            expand_civilization(universe, civ, self.factory, self.rng)

        await run_batched(
            list(universe.civilizations), expand, EXPANSION_BATCH_SIZE,
            self._stage_reporter(PROGRESS_EXPANSION, "Expanding civilizations"),
        )

    # --- ETAPA 6: ARTEFACTOS ---

    def artifact_locations(self) -> List[Planet]:
        """Planetas barajados; los colonizados entran solo con baja probabilidad."""
        locations = [
            p for p in self.universe.iter_planets()
            if not p.is_inhabited or self.rng.chance(COLONIZED_ARTIFACT_CHANCE)
        ]
        self.rng.shuffle(locations)
        return locations

    async def _place_artifacts(self) -> None:
        self._report(PROGRESS_ARTIFACTS[0], "Adding artifacts...")
        count = math.floor(self.target_star_count * ARTIFACT_STAR_RATIO)
        selected = self.artifact_locations()[:count]

        def place(location: Planet, _index: int) -> None:
            artifact_type = self.rng.choice(STANDALONE_ARTIFACT_TYPES)
            result = self.factory.create_artifact(artifact_type, location)
            if result.ok:
                location.add_artifact(result.entity)

        await run_batched(selected, place, self.batch_size, self._stage_reporter(PROGRESS_ARTIFACTS, "Adding artifacts"))
        self._report(PROGRESS_ARTIFACTS[1], "Artifacts added")

    # --- FINALIZACIÓN ---

    def _finalize(self) -> Universe:
        self._report(PROGRESS_FINALIZE[0], "Finalizing galaxy...")
        metadata = self.universe.refresh_metadata()
        logger.info(
            f"Galaxia generada: {metadata.star_count} estrellas, {metadata.planet_count} planetas, "
            f"{metadata.civilization_count} civilizaciones, {metadata.habitable_planets} habitables"
        )
        self._emit(100, "Galaxy generated!")
        return self.universe

    # --- MODO TEST ---

    def _generate_test_universe(self) -> Universe:
        """
        Universo mínimo: TEST_STAR_COUNT estrellas con un planeta cada una
        y como mucho una civilización en la primera estrella con planeta.
        Ignora star_count y civ_probability.
        """
        logger.info("Generando universo de prueba...")
        self._report(10, "Creating test universe...")
        universe = self._new_universe(GalaxyType.TEST)
        self.universe = universe

        for i in range(TEST_STAR_COUNT):
            result = self.factory.create_star(GalaxyType.TEST, TEST_RADIAL_SEED)
            if not result.ok:
                continue
            star = result.entity
            universe.add_star(star)
            self._populate_star(star, 1)
            self._report(20 + i * 10, f"Created test star {i + 1}/{TEST_STAR_COUNT}")

        first = next((s for s in universe.stars if s.planets), None)
        if first is not None:
            result = self.factory.create_civilization(first.planets[0])
            if result.ok:
                universe.add_civilization(result.entity)

        universe.refresh_metadata()
        self._emit(100, "Test universe created!")
        return universe


def _coerce_options(options: Union[GenerationOptions, Dict[str, Any], None]) -> GenerationOptions:
    if isinstance(options, GenerationOptions):
        return options
    try:
        return GenerationOptions.from_mapping(options)
    except PydanticValidationError as e:
        raise GenerationSetupError("Opciones de generación inválidas", {"errors": e.errors()}) from e


async def generate_universe(
    options: Union[GenerationOptions, Dict[str, Any], None] = None,
    progress_callback: Optional[ProgressCallback] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[RandomService] = None,
    names: Optional[NameGenerator] = None,
    batch_size: int = GENERATION_BATCH_SIZE,
) -> Universe:
    """
    Atajo de alto nivel: valida opciones, arma los servicios y corre el pipeline.

    Args:
        options: GenerationOptions o un dict (acepta claves camelCase).
        progress_callback: Recibe (porcentaje, mensaje).
        seed: Semilla para un RandomService nuevo si no se pasa `rng`.
        rng / names: Servicios ya construidos (opcional).
    """
    try:
        parsed = _coerce_options(options)
    except GenerationSetupError as e:
        logger.error(f"No se puede iniciar la generación: {e}")
        if progress_callback is not None:
            try:
                progress_callback(100, e.report_message)
            except Exception as callback_error:
                log_exception(callback_error, "progress_callback")
        raise

    rng = rng or RandomService(seed)
    names = names or NameGenerator(rng)
    generator = GalaxyGenerator(parsed, rng, names, batch_size=batch_size)
    return await generator.generate(progress_callback)
