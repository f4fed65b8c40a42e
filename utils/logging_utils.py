# utils/logging_utils.py
"""
Utilidades de logging del generador.
Registro uniforme de errores por entidad (estrella, planeta, civilización),
un decorador para operaciones que no deben cortar una etapa y un adaptador
que vuelca el progreso del pipeline al log.
"""
import logging
import traceback
from typing import Optional, Any, Callable
from functools import wraps

from config.app_constants import LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT

logger = logging.getLogger(LOGGER_NAME)


def _entity_id_from(args: tuple, kwargs: dict) -> Optional[str]:
    """Busca un id de entidad en los argumentos (objeto con `.id` o str)."""
    candidate = kwargs.get("entity_id")
    if candidate is None and args:
        candidate = args[0]
    if isinstance(candidate, str):
        return candidate
    return getattr(candidate, "id", None)


def log_exception(
    error: Exception,
    context: str,
    entity_id: Optional[str] = None,
    extra_data: Optional[dict] = None
) -> None:
    """
    Registra una excepción con su contexto de generación.

    Args:
        error: La excepción capturada
        context: Operación que falló (p.ej. "create_planet")
        entity_id: Id de la estrella/planeta/civilización involucrada
        extra_data: Datos adicionales para depurar (índice de lote, porcentaje...)
    """
    details = {
        "context": context,
        "error_type": type(error).__name__,
        "error_message": str(error),
        "entity_id": entity_id,
        "traceback": traceback.format_exc(),
        **(extra_data or {})
    }
    suffix = f" (entity: {entity_id})" if entity_id else ""
    logger.error(f"[{context}] {type(error).__name__}: {error}{suffix}", extra={"details": details})


def safe_operation(operation_name: str, default_return: Any = None, reraise: bool = False):
    """
    Decorador para operaciones cuyo fallo no debe abortar la corrida.

    Usage:
        @safe_operation("describe_civilization", default_return="")
        def describe(civ) -> str:
            ...

    Args:
        operation_name: Nombre de la operación para el log
        default_return: Valor a devolver si falla
        reraise: Si es True, vuelve a lanzar luego de registrar
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_exception(e, operation_name, _entity_id_from(args, kwargs))
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


def progress_logger(target: Optional[logging.Logger] = None, level: int = logging.INFO) -> Callable[[float, str], None]:
    """Callback de progreso (porcentaje, mensaje) que escribe en el log."""
    out = target or logger

    def report(percent: float, message: str) -> None:
        out.log(level, f"[{percent:5.1f}%] {message}")
    return report


def setup_logging(level: int = logging.INFO) -> None:
    """Configura el logging raíz y el logger de la aplicación."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logger.setLevel(level)
