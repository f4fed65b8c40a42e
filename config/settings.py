# config/settings.py
import os
from dotenv import load_dotenv

from config.app_constants import BATCH_SIZE, DEFAULT_GALAXY_TYPE

# Cargar variables de entorno desde el archivo .env
load_dotenv()


def get_setting(key: str, default: str | None = None) -> str | None:
    """
    Obtiene un valor de configuración desde las variables de entorno.

    Args:
        key: La clave a buscar.
        default: Valor por defecto si la clave no existe o está vacía.

    Returns:
        El valor encontrado o el default.
    """
    value = os.getenv(key)
    if value:
        return value
    return default


def _parse_int(key: str, raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Error de configuración: {key} debe ser un entero (valor: {raw!r}).")


# --- Parámetros de Generación ---
LOG_LEVEL: str = (get_setting("GALAXY_LOG_LEVEL", "INFO") or "INFO").upper()
GENERATION_BATCH_SIZE: int = _parse_int("GALAXY_BATCH_SIZE", get_setting("GALAXY_BATCH_SIZE")) or BATCH_SIZE
GENERATION_SEED: int | None = _parse_int("GALAXY_SEED", get_setting("GALAXY_SEED"))
DEFAULT_TYPE: str = get_setting("GALAXY_DEFAULT_TYPE", DEFAULT_GALAXY_TYPE) or DEFAULT_GALAXY_TYPE

# Validar que el tamaño de lote sea utilizable
if GENERATION_BATCH_SIZE < 1:
    raise ValueError("Error de configuración: GALAXY_BATCH_SIZE debe ser mayor que cero.")
