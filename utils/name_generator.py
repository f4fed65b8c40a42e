# utils/name_generator.py
"""
Generador procedural de nombres para estrellas, planetas, civilizaciones
y megaestructuras. No usa IA: combina prefijos, raíces y sufijos.
"""
from typing import Optional

from utils.random_utils import RandomService

STAR_NAME_PREFIXES = [
    'Alpha', 'Beta', 'Gamma', 'Delta', 'Epsilon', 'Zeta', 'Eta', 'Theta', 'Iota', 'Kappa', 'Lambda', 'Mu',
    'Nu', 'Xi', 'Omicron', 'Pi', 'Rho', 'Sigma', 'Tau', 'Upsilon', 'Phi', 'Chi', 'Psi', 'Omega', 'Proxima',
    'Ultima', 'Nova', 'Hyper', 'Quantum', 'Cosmic', 'Astro', 'Galactic', 'Stellar', 'Nebula', 'Pulsar',
    'Quasar', 'Void', 'Aether', 'Flux', 'Lumen', 'Umbra', 'Radiant', 'Twilight', 'Dawn', 'Dusk', 'Zenith',
    'Nadir', 'Apex', 'Core', 'Fringe', 'Frontier', 'Nexus', 'Vertex', 'Vortex', 'Helix', 'Spiral',
]
STAR_NAME_ROOTS = [
    'Centauri', 'Eridani', 'Cygni', 'Draconis', 'Aquarii', 'Leonis', 'Ursae', 'Scorpii', 'Orionis', 'Pegasi',
    'Andromeda', 'Cassiopeia', 'Lyra', 'Auriga', 'Boötes', 'Carina', 'Cepheus', 'Corvus', 'Crux', 'Gemini',
    'Hercules', 'Hydra', 'Lacerta', 'Lupus', 'Lynx', 'Ophiuchus', 'Perseus', 'Phoenix', 'Pictor', 'Sagittarius',
    'Taurus', 'Vela', 'Volans', 'Vulpecula', 'Xephyr', 'Ystera', 'Zephyrus', 'Chronos', 'Cosmos',
    'Erebus', 'Helios', 'Hyperion', 'Khaos', 'Nyx', 'Oranos', 'Tartarus', 'Thalassa', 'Ourania', 'Astraeus',
    'Phoebe', 'Rhea', 'Theia', 'Themis', 'Crius', 'Mnemosyne', 'Prometheus', 'Styx', 'Selene', 'Eos',
]
STAR_NAME_SUFFIXES = [
    'Prime', 'Major', 'Minor', 'Maxima', 'Minima', 'Proxima', 'Ultima', 'Nova', 'Superba', 'Magna',
    'Borealis', 'Australis', 'Occidentalis', 'Orientalis', 'Centralis', 'Peripheria', 'Anterior', 'Posterior',
    'Superior', 'Inferior', 'Luminosa', 'Obscura', 'Radianta', 'Nebulosa', 'Vortexa', 'Pulsara', 'Quasara',
    'Coronae', 'Crucis', 'Lupi', 'Serpentis', 'Tauri', 'Velorum', 'Virginis',
    'Carinae', 'Phoenicis', 'Aquilae', 'Ceti', 'Delphini', 'Gruis', 'Hydrae', 'Pavonis', 'Telescopii',
]

PLANET_NAME_PREFIXES = [
    'New', 'Old', 'Neo', 'Paleo', 'Micro', 'Macro', 'Hyper', 'Hypo', 'Ultra', 'Infra', 'Xeno', 'Exo', 'Endo',
    'Iso', 'Poly', 'Mono', 'Multi', 'Omni', 'Pan', 'Hemi', 'Proto', 'Meta', 'Para', 'Quasi', 'Pseudo', 'Crypto',
    'Archaeo', 'Meso', 'Tele', 'Holo', 'Nano', 'Pico', 'Giga', 'Tera', 'Peta', 'Exa', 'Zetta', 'Yotta',
    'Bronto', 'Mega', 'Supra', 'Super', 'Trans',
]
PLANET_NAME_ROOTS = [
    'Terra', 'Gaia', 'Luna', 'Sol', 'Helios', 'Selene', 'Ares', 'Athena', 'Zeus', 'Hera', 'Poseidon', 'Demeter',
    'Apollo', 'Artemis', 'Hephaestus', 'Aphrodite', 'Hermes', 'Dionysus', 'Hades', 'Persephone', 'Chronos', 'Rhea',
    'Oceanus', 'Tethys', 'Hyperion', 'Theia', 'Crius', 'Mnemosyne', 'Phoebe', 'Themis', 'Atlas', 'Prometheus',
    'Epimetheus', 'Coeus', 'Cronus', 'Iapetus', 'Aegaeon', 'Aether', 'Ananke', 'Erebus', 'Eros', 'Geras', 'Hemera',
    'Hypnos', 'Nemesis', 'Nyx', 'Oneiroi', 'Phanes', 'Pontus', 'Tartarus', 'Thalassa', 'Thanatos', 'Uranus',
    'Zephyrus', 'Boreas', 'Notus',
]
PLANET_NAME_SUFFIXES = [
    'Prime', 'Secundus', 'Tertius', 'Quartus', 'Quintus', 'Sextus', 'Septimus', 'Octavus', 'Nonus', 'Decimus',
    'Alpha', 'Beta', 'Gamma', 'Delta', 'Epsilon', 'Zeta', 'Eta', 'Theta', 'Iota', 'Kappa', 'Major', 'Minor',
    'Maximus', 'Minimus', 'Magnus', 'Parvus', 'Novus', 'Antiquus', 'Primus', 'Ultimus', 'Borealis', 'Australis',
    'Orientalis', 'Occidentalis', 'Centralis', 'Exterior', 'Interior', 'Superior', 'Inferior', 'Proxima', 'Remota',
    'Frigidus', 'Calidus', 'Obscurus', 'Luminosus', 'Ferreus', 'Aquaticus', 'Saxeus', 'Crystallus',
]

CIVILIZATION_NAME_PREFIXES = [
    "Az", "Xen", "Vex", "Qu", "Neb", "Lum", "Kry", "Jov", "Hel", "Gal", "Vor", "Zar", "Eth", "Dra", "Thal",
    "Phax", "Mer", "Tyr", "Sil", "Bor", "Chax", "Ark", "Fel", "Trill", "Rax",
]
CIVILIZATION_NAME_MIDS = [
    "ar", "or", "an", "en", "in", "om", "um", "al", "el", "il", "ax", "ex", "ix", "ox", "ux", "on", "th", "ra",
    "ri", "ze", "ko", "ma", "tu", "va", "yu",
]
CIVILIZATION_NAME_SUFFIXES = [
    "ian", "ite", "oid", "ean", "ar", "on", "id", "an", "ese", "ax", "ex", "ix", "ox", "ux",
    "ari", "ori", "uri", "athi", "othi", "izi", "azi", "uzi", "exi",
]

MEGASTRUCTURE_PREFIXES = ['Grand', 'Eternal', 'Celestial', 'Prime', 'Ultimate', 'Sovereign']
MEGASTRUCTURE_TYPES = ['Sphere', 'Ring', 'Vault', 'Nexus', 'Array', 'Web', 'Matrix']
MEGASTRUCTURE_SUFFIXES = ['of Creation', 'of Destiny', 'of Prosperity', 'of Eternity', 'of Power']


class NameGenerator:
    """Genera nombres a partir del servicio de azar inyectado."""

    def __init__(self, rng: Optional[RandomService] = None):
        self.rng = rng or RandomService()

    def _compose(self, prefixes, roots, suffixes, prefix_chance: float, suffix_chance: float) -> str:
        use_prefix = self.rng.chance(prefix_chance)
        use_suffix = self.rng.chance(suffix_chance)

        parts = []
        if use_prefix:
            parts.append(self.rng.choice(prefixes))
        parts.append(self.rng.choice(roots))
        if use_suffix:
            parts.append(self.rng.choice(suffixes))
        return " ".join(parts)

    def star_name(self) -> str:
        return self._compose(STAR_NAME_PREFIXES, STAR_NAME_ROOTS, STAR_NAME_SUFFIXES, 0.4, 0.3)

    def planet_name(self) -> str:
        return self._compose(PLANET_NAME_PREFIXES, PLANET_NAME_ROOTS, PLANET_NAME_SUFFIXES, 0.5, 0.6)

    def civilization_name(self) -> str:
        """Nombre aglutinado: prefijo + (medio) + sufijo, p.ej. 'Xenaroid'."""
        use_mid = self.rng.chance(0.4)
        prefix = self.rng.choice(CIVILIZATION_NAME_PREFIXES)
        mid = self.rng.choice(CIVILIZATION_NAME_MIDS) if use_mid else ""
        suffix = self.rng.choice(CIVILIZATION_NAME_SUFFIXES)
        return f"{prefix}{mid}{suffix}"

    def megastructure_name(self) -> str:
        prefix = f"{self.rng.choice(MEGASTRUCTURE_PREFIXES)} " if self.rng.chance(0.7) else ""
        suffix = f" {self.rng.choice(MEGASTRUCTURE_SUFFIXES)}" if self.rng.chance(0.5) else ""
        return f"{prefix}{self.rng.choice(MEGASTRUCTURE_TYPES)}{suffix}"
