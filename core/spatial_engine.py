# core/spatial_engine.py
"""
Motor de Distribución Espacial.
Traduce un tipo de galaxia y una semilla radial en [0, 1] a coordenadas 3D.
- spiral: bulbo central + 2-4 brazos logarítmicos con disco aplanado.
- elliptical: gaussiana triaxial (Box-Muller).
- irregular / test: caja uniforme.
Nunca divide por cero; un resultado no finito se degrada al origen.
"""
import logging
import math

from config.app_constants import (
    GALAXY_SCALE,
    TEST_GALAXY_SCALE,
    IRREGULAR_SCALE_FACTOR,
    CORE_RADIUS_FACTOR,
    CORE_STAR_CHANCE,
)
from core.models import GalaxyType
from core.world_models import Coordinates
from utils.random_utils import RandomService

logger = logging.getLogger(__name__)

# Evita log(0) en Box-Muller
_LOG_FLOOR = 1e-9


def _clamp_seed(radial_seed: float) -> float:
    if radial_seed is None or not math.isfinite(radial_seed):
        logger.warning(f"Semilla radial inválida ({radial_seed!r}); se usa 0.")
        return 0.0
    if radial_seed < 0.0 or radial_seed > 1.0:
        logger.warning(f"Semilla radial fuera de rango ({radial_seed}); se recorta a [0, 1].")
        return min(1.0, max(0.0, radial_seed))
    return radial_seed


def spiral_coordinates(radial_seed: float, rng: RandomService, scale: float = GALAXY_SCALE) -> Coordinates:
    arm_count = rng.number(2, 5, integer=True)
    arm = math.floor(rng.random() * arm_count)
    arm_offset = (2 * math.pi * arm) / arm_count
    arm_tightness = 0.2 + rng.random() * 0.2
    arm_width = 0.3 / arm_count

    core_radius = scale * CORE_RADIUS_FACTOR

    if rng.chance(CORE_STAR_CHANCE):
        # Bulbo: muestreo polar, levemente achatado
        r = rng.random() * core_radius
        phi = rng.random() * math.pi
        theta = rng.random() * 2 * math.pi
        distance = r * math.sin(phi)
        z = r * math.cos(phi) * 0.7
    else:
        distance = core_radius + (scale - core_radius) * math.sqrt(radial_seed)
        base_theta = arm_offset + distance * arm_tightness
        theta = base_theta + (rng.random() - 0.5) * arm_width

        # Disco más delgado hacia el borde
        z_variance = scale * 0.03 * (1 - math.pow(distance / scale, 2))
        z = rng.number(-z_variance, z_variance)

    fuzz = scale * 0.02
    return Coordinates(
        x=distance * math.cos(theta) + rng.number(-fuzz, fuzz),
        y=distance * math.sin(theta) + rng.number(-fuzz, fuzz),
        z=z + rng.number(-fuzz * 0.5, fuzz * 0.5),
    )


def elliptical_coordinates(rng: RandomService, scale: float = GALAXY_SCALE) -> Coordinates:
    u1 = rng.random()
    u2 = rng.random()
    radius = math.sqrt(-2.0 * math.log(u1 or _LOG_FLOOR))
    normal_x = radius * math.cos(2.0 * math.pi * u2)
    normal_y = radius * math.sin(2.0 * math.pi * u2)
    u3 = rng.random()
    u4 = rng.random()
    normal_z = math.sqrt(-2.0 * math.log(u3 or _LOG_FLOOR)) * math.cos(2.0 * math.pi * u4)

    a = scale * 0.5
    b = a * rng.number(0.5, 0.7)
    c = b * rng.number(0.6, 0.8)
    return Coordinates(x=normal_x * a, y=normal_y * b, z=normal_z * c)


def box_coordinates(rng: RandomService, half_extent: float) -> Coordinates:
    return Coordinates(
        x=rng.number(-half_extent, half_extent),
        y=rng.number(-half_extent, half_extent),
        z=rng.number(-half_extent * 0.3, half_extent * 0.3),
    )


def generate_coordinates(galaxy_type: GalaxyType, radial_seed: float, rng: RandomService) -> Coordinates:
    """
    Punto de entrada del motor.

    Args:
        galaxy_type: Topología de la galaxia.
        radial_seed: Distancia normalizada al centro en [0, 1].
        rng: Servicio de azar compartido por la corrida.

    Returns:
        Coordenadas finitas; el origen si algo sale mal.
    """
    seed = _clamp_seed(radial_seed)
    kind = GalaxyType(galaxy_type)

    if kind == GalaxyType.SPIRAL:
        coords = spiral_coordinates(seed, rng)
    elif kind == GalaxyType.ELLIPTICAL:
        coords = elliptical_coordinates(rng)
    elif kind == GalaxyType.TEST:
        coords = box_coordinates(rng, TEST_GALAXY_SCALE)
    else:
        coords = box_coordinates(rng, GALAXY_SCALE * IRREGULAR_SCALE_FACTOR)

    if not coords.is_finite():
        logger.warning(f"Coordenadas no finitas para galaxia {kind.value}; se usa el origen.")
        return Coordinates()
    return coords
