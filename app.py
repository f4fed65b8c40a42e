# app.py
"""
CLI del generador de galaxias.
Uso: python app.py --galaxy-type spiral --stars 200 --civ-probability 0.2 --seed 7 --graph
"""
import argparse
import asyncio
import logging
import sys
import traceback

from config.app_constants import DEFAULT_STAR_COUNT, DEFAULT_CIV_PROBABILITY
from config.settings import DEFAULT_TYPE, GENERATION_SEED, LOG_LEVEL
from core.descriptions import summarize_universe
from core.exceptions import GenerationSetupError
from core.galaxy_generator import generate_universe
from core.graph_projection import project_universe
from core.models import GalaxyType, NodeType
from utils.logging_utils import progress_logger, setup_logging

logger = logging.getLogger(__name__)


# --- UTILIDADES DE VISUALIZACIÓN ---
class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def print_header(msg: str):
    print(f"\n{Colors.HEADER}{Colors.BOLD}=== {msg} ==={Colors.ENDC}")


def print_success(msg: str):
    print(f"{Colors.GREEN}✔ {msg}{Colors.ENDC}")


def print_error(msg: str):
    print(f"{Colors.FAIL}✘ {msg}{Colors.ENDC}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generador procedural de galaxias")
    parser.add_argument("--galaxy-type", default=DEFAULT_TYPE, choices=[t.value for t in GalaxyType],
                        help="Topología de la galaxia")
    parser.add_argument("--stars", type=int, default=DEFAULT_STAR_COUNT, help="Cantidad de estrellas solicitadas")
    parser.add_argument("--civ-probability", type=float, default=DEFAULT_CIV_PROBABILITY,
                        help="Probabilidad de sembrar civilizaciones (0-1)")
    parser.add_argument("--seed", type=int, default=GENERATION_SEED, help="Semilla para reproducir la corrida")
    parser.add_argument("--graph", action="store_true", help="Proyecta el universo a nodos/enlaces y muestra el conteo")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Nivel de log (DEBUG, INFO, WARNING...)")
    return parser


async def run(args: argparse.Namespace) -> int:
    options = {
        "galaxyType": args.galaxy_type,
        "starCount": args.stars,
        "civProbability": args.civ_probability,
    }
    print_header(f"GENERANDO GALAXIA {args.galaxy_type.upper()}")

    try:
        universe = await generate_universe(options, progress_logger(logger), seed=args.seed)
    except GenerationSetupError as e:
        print_error(f"No se pudo iniciar la generación: {e}")
        return 2

    print_success("Galaxia generada")
    print(summarize_universe(universe))

    if args.graph:
        print_header("PROYECCIÓN A GRAFO")
        graph = project_universe(universe)
        print(f"Nodos: {len(graph.nodes)} | Enlaces: {len(graph.links)}")
        for node_type in NodeType:
            count = len(graph.nodes_of_type(node_type))
            if count:
                print(f" - {node_type.value}: {count}")
    return 0


def main() -> None:
    args = build_parser().parse_args()
    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO))

    try:
        sys.exit(asyncio.run(run(args)))
    except Exception:
        print_header("EXCEPCIÓN NO CONTROLADA")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
