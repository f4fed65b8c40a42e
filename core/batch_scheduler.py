# core/batch_scheduler.py
"""
Planificador por Lotes.
Procesa una secuencia en porciones de tamaño fijo y cede el control al
event loop de asyncio entre porciones, de modo que ningún lote bloquee
más de su propio tiempo de cómputo.
"""
import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

from config.app_constants import BATCH_SIZE
from utils.logging_utils import log_exception

logger = logging.getLogger(__name__)

ProcessFunc = Callable[[Any, int], Any]
ProgressCallback = Callable[[float, int, int], Any]
CompletionCallback = Callable[[], Any]


@dataclass(frozen=True)
class BatchProgress:
    percent: float
    done: int
    total: int


def batch_count(total: int, batch_size: int) -> int:
    return math.ceil(total / batch_size) if total > 0 else 0


def iter_batches(items: Sequence[Any], batch_size: int = BATCH_SIZE) -> Iterator[Tuple[int, Sequence[Any]]]:
    """Genera (índice inicial, porción) en orden."""
    if batch_size < 1:
        raise ValueError(f"batch_size debe ser >= 1 (recibido {batch_size})")
    for start in range(0, len(items), batch_size):
        yield start, items[start:start + batch_size]


def _notify_progress(progress_callback: Optional[ProgressCallback], progress: BatchProgress) -> None:
    if progress_callback is None:
        return
    try:
        progress_callback(progress.percent, progress.done, progress.total)
    except Exception as e:
        log_exception(e, "progress_callback", extra_data={"done": progress.done, "total": progress.total})


def _notify_completion(completion_callback: Optional[CompletionCallback]) -> None:
    if completion_callback is None:
        return
    try:
        completion_callback()
    except Exception as e:
        log_exception(e, "completion_callback")


def process_batched(
    items: Optional[Sequence[Any]],
    process_func: ProcessFunc,
    batch_size: int = BATCH_SIZE,
    progress_callback: Optional[ProgressCallback] = None,
    completion_callback: Optional[CompletionCallback] = None,
    *,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> "asyncio.Future[int]":
    """
    Programa el procesamiento por lotes en el loop actual.

    Cada porción corre en su propio callback de `loop.call_soon`; entre
    porciones se reporta (porcentaje, hechos, total). Los errores por ítem
    se registran y no detienen el lote. Con 0 ítems se reporta 100 una vez
    y la finalización ocurre en una vuelta posterior del loop, nunca antes
    de que esta función retorne. Un error fuera de process_func (p.ej. una
    secuencia que no admite porciones) rechaza el future con esa excepción.

    Returns:
        Future que se resuelve con la cantidad de ítems recorridos.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size debe ser >= 1 (recibido {batch_size})")

    loop = loop or asyncio.get_running_loop()
    future: "asyncio.Future[int]" = loop.create_future()
    items = items or []
    total = len(items)
    batches = iter_batches(items, batch_size)

    def fail(error: Exception) -> None:
        log_exception(error, "process_batched")
        if not future.done():
            future.set_exception(error)

    def finish() -> None:
        try:
            _notify_completion(completion_callback)
            if not future.done():
                future.set_result(total)
        except Exception as e:
            fail(e)

    def step() -> None:
        if future.done():
            return
        try:
            start, chunk = next(batches)
            for offset, item in enumerate(chunk):
                index = start + offset
                try:
                    process_func(item, index)
                except Exception as e:
                    log_exception(e, "process_batched", extra_data={"index": index})

            done = start + len(chunk)
            _notify_progress(progress_callback, BatchProgress(done / total * 100, done, total))
        except Exception as e:
            fail(e)
            return

        if done < total:
            loop.call_soon(step)
        else:
            finish()

    if total == 0:
        _notify_progress(progress_callback, BatchProgress(100.0, 0, 0))
        loop.call_soon(finish)
    else:
        loop.call_soon(step)
    return future


async def run_batched(
    items: Optional[Sequence[Any]],
    process_func: ProcessFunc,
    batch_size: int = BATCH_SIZE,
    progress_callback: Optional[ProgressCallback] = None,
) -> int:
    """Versión awaitable de process_batched."""
    return await process_batched(items, process_func, batch_size, progress_callback)
