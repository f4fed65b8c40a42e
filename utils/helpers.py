# utils/helpers.py
import math
import re
from typing import Any


def _axis(point: Any, name: str) -> float:
    if isinstance(point, dict):
        return float(point.get(name, 0.0))
    return float(getattr(point, name, 0.0))


def calculate_3d_distance(point_a: Any, point_b: Any) -> float:
    """
    Distancia euclídea entre dos puntos 3D.
    Acepta objetos con atributos x/y/z o diccionarios con esas claves.
    """
    dx = _axis(point_b, "x") - _axis(point_a, "x")
    dy = _axis(point_b, "y") - _axis(point_a, "y")
    dz = _axis(point_b, "z") - _axis(point_a, "z")
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def capitalize_words(text: str) -> str:
    """
    Convierte 'hive-mind' en 'Hive Mind'.
    Retorna cadena vacía si la entrada no es texto.
    """
    if not text or not isinstance(text, str):
        return ""
    spaced = text.replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def indefinite_article(word: str) -> str:
    """'an' para palabras que empiezan con vocal, 'a' en otro caso."""
    return "an" if word and word[0].lower() in "aeiou" else "a"
