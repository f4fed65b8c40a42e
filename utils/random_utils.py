# utils/random_utils.py
"""
Servicio de azar y redondeo.
Se construye explícitamente y se inyecta en fábricas y orquestador,
de modo que una semilla reproduce la misma galaxia completa.
"""
import itertools
import math
import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


def round_to(value: float, decimals: int = 2) -> float:
    """
    Redondeo "half up" a `decimals` posiciones.
    A diferencia de round(), 2.675 -> 2.68.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


class RandomService:
    """
    Envoltorio sobre random.Random con los helpers que usa la generación.
    Todos los componentes comparten la misma instancia durante una corrida.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self._sequence = itertools.count(1)

    def random(self) -> float:
        """Valor uniforme en [0, 1)."""
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """True con probabilidad `probability`."""
        return self.random() < probability

    def number(self, minimum: float, maximum: float, integer: bool = False) -> float:
        """
        Número uniforme en [minimum, maximum).
        Con integer=True se trunca hacia abajo (rango semiabierto).
        """
        value = self.random() * (maximum - minimum) + minimum
        return math.floor(value) if integer else value

    def randint(self, minimum: int, maximum: int) -> int:
        """Entero en [minimum, maximum], ambos inclusive."""
        return self._rng.randint(minimum, maximum)

    def choice(self, items: Sequence[T]) -> Optional[T]:
        """Elemento aleatorio o None si la secuencia está vacía."""
        if not items:
            return None
        return items[self._rng.randrange(len(items))]

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Fisher-Yates en el lugar."""
        self._rng.shuffle(items)

    def make_id(self, prefix: str) -> str:
        """
        Identificador único por corrida: prefijo, secuencia y sufijo aleatorio.
        La secuencia garantiza unicidad aun con la misma semilla.
        """
        return f"{prefix}-{next(self._sequence):05d}-{self._rng.getrandbits(24):06x}"
