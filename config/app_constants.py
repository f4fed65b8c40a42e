# config/app_constants.py
"""
Constantes globales de la aplicación para escalabilidad y mantenibilidad.
Centraliza valores mágicos dispersos en el pipeline de generación.
"""

# --- Límites de Generación ---
MAX_STARS = 3000
MAX_PLANETS_PER_STAR = 9
MAX_CIVILIZATIONS = 50
MAX_ARTIFACTS_PER_PLANET = 2
BATCH_SIZE = 10                   # Objetos procesados por lote antes de ceder el loop
EXPANSION_BATCH_SIZE = 1          # Las civilizaciones se expanden de a una

# --- Opciones por defecto ---
DEFAULT_GALAXY_TYPE = "spiral"
DEFAULT_STAR_COUNT = 100
DEFAULT_CIV_PROBABILITY = 0.1

# --- Escalas Espaciales ---
GALAXY_SCALE = 1500.0
TEST_GALAXY_SCALE = 300.0
IRREGULAR_SCALE_FACTOR = 0.6
CORE_RADIUS_FACTOR = 0.15
CORE_STAR_CHANCE = 0.2

# --- Modo Test ---
TEST_STAR_COUNT = 5
TEST_RADIAL_SEED = 0.5

# --- Reparto del Progreso (0-100) ---
# Cada etapa cubre [inicio, fin) de la barra global.
PROGRESS_STARS = (0.0, 20.0)
PROGRESS_PLANETS = (20.0, 50.0)
PROGRESS_CIVILIZATIONS = (50.0, 65.0)
PROGRESS_RELATIONSHIPS = (65.0, 70.0)
PROGRESS_EXPANSION = (70.0, 85.0)
PROGRESS_ARTIFACTS = (85.0, 90.0)
PROGRESS_FINALIZE = (90.0, 100.0)
PROGRESS_CEILING = 99.0           # Nunca se reporta 100 antes de finalizar

# --- Civilizaciones ---
HABITABLE_THRESHOLD = 60          # Umbral para candidatos a civilización y métricas
CIV_CANDIDATE_POOL_FACTOR = 2     # Se evalúan el doble de planetas que civs máximas
EXPANSION_BASE_RANGE = 100
EXPANSION_RANGE_PER_TECH = 20
EXPANSION_HABITABILITY_THRESHOLD = 50
EXPANSION_CHANCE_HIGH = 0.2
EXPANSION_CHANCE_LOW = 0.05
COLONY_ARTIFACT_CHANCE = 0.7
TRAIT_SELECTION_ATTEMPTS = 100
SPECIALIZATION_ATTEMPTS = 50

# --- Artefactos ---
ARTIFACT_STAR_RATIO = 0.05        # 5% de las estrellas solicitadas
COLONIZED_ARTIFACT_CHANCE = 0.1   # Probabilidad de aceptar un planeta colonizado

# --- Configuración de Logs ---
LOGGER_NAME = "galaxyforge"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
