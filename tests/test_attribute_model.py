# tests/test_attribute_model.py
"""
Tests for the random attribute model (stars, planets, civilizations).
"""
import math
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.random_utils import RandomService


class FixedRandom(RandomService):
    """RandomService whose uniform draws always return the same value."""

    def __init__(self, value: float):
        super().__init__(seed=0)
        self.value = value

    def random(self) -> float:
        return self.value


class TestStarAttributes:
    """Tests for star derivation rules."""

    def test_star_mass_within_bounds(self):
        """Masses always land in [0.08, 50] with two decimals."""
        from core.attribute_model import generate_star_mass

        rng = RandomService(seed=1)
        for _ in range(500):
            mass = generate_star_mass(rng)
            assert 0.08 <= mass <= 50
            assert round(mass, 2) == mass

    def test_luminosity_follows_mass_power_law(self):
        """Luminosity is mass^3.5 rounded to two decimals."""
        from core.attribute_model import calculate_luminosity

        assert calculate_luminosity(1.0) == 1.0
        assert calculate_luminosity(2.0) == round(2.0 ** 3.5, 2)
        assert calculate_luminosity(0.1) == 0.0

    def test_temperature_is_capped(self):
        """Temperature grows with mass but never exceeds 50000 K."""
        from core.attribute_model import calculate_star_temperature

        assert calculate_star_temperature(1.0) == 7000
        assert calculate_star_temperature(50.0) == 50000

    def test_spectral_type_thresholds(self):
        """Thresholds are strict: exactly 30000 K is B, not O."""
        from core.attribute_model import determine_spectral_type

        assert determine_spectral_type(30001) == "O"
        assert determine_spectral_type(30000) == "B"
        assert determine_spectral_type(8000) == "A"
        assert determine_spectral_type(6500) == "F"
        assert determine_spectral_type(5500) == "G"
        assert determine_spectral_type(3501) == "K"
        assert determine_spectral_type(3500) == "M"

    def test_star_size_classes(self):
        """Verify size classes by mass."""
        from core.attribute_model import determine_star_size

        assert determine_star_size(25) == "supergiant"
        assert determine_star_size(6) == "giant"
        assert determine_star_size(0.3) == "dwarf"
        assert determine_star_size(1.0) == "medium"

    def test_age_never_exceeds_lifespan_or_universe(self):
        """Age is bounded by min(13.8, lifespan)."""
        from core.attribute_model import generate_star_age, stellar_lifespan

        rng = RandomService(seed=3)
        for mass in (0.1, 1.0, 5.0, 40.0):
            limit = min(13.8, stellar_lifespan(mass))
            for _ in range(50):
                age = generate_star_age(mass, rng)
                assert age <= round(limit, 2) + 0.01

    def test_evolution_low_mass_star(self):
        """A solar-mass star moves from protostar to white dwarf."""
        from core.attribute_model import calculate_evolution
        from core.models import StellarEvolution

        assert calculate_evolution(1.0, 0.5) == StellarEvolution.PROTOSTAR
        assert calculate_evolution(1.0, 5.0) == StellarEvolution.MAIN_SEQUENCE
        assert calculate_evolution(1.0, 9.3) == StellarEvolution.RED_GIANT
        assert calculate_evolution(1.0, 9.6) == StellarEvolution.WHITE_DWARF

    def test_evolution_massive_stars(self):
        """Massive stars end as neutron stars or black holes."""
        from core.attribute_model import calculate_evolution
        from core.models import StellarEvolution

        assert calculate_evolution(10.0, 0.03) == StellarEvolution.RED_SUPERGIANT
        assert calculate_evolution(10.0, 0.0316) == StellarEvolution.NEUTRON_STAR
        assert calculate_evolution(25.0, 0.0031) == StellarEvolution.SUPERNOVA_IMMINENT
        assert calculate_evolution(25.0, 0.00316) == StellarEvolution.BLACK_HOLE

    def test_companions(self):
        """Binary systems get one or two lighter companions."""
        from core.attribute_model import generate_companions

        rng = RandomService(seed=11)
        for _ in range(50):
            companions = generate_companions(2.0, rng)
            assert 1 <= len(companions) <= 2
            for companion in companions:
                assert 0.6 <= companion.mass <= 2.0
                assert 10 <= companion.orbit_distance <= 110
                assert companion.orbital_period > 0
                assert companion.spectral_type in "OBAFGKM"

    def test_star_features_by_stage_and_class(self):
        """Stage and class features are always added."""
        from core.attribute_model import generate_star_features
        from core.models import StellarEvolution

        rng = RandomService(seed=5)
        assert 'stellar-wind' in generate_star_features(StellarEvolution.RED_GIANT, 'K', rng)
        assert 'unstable' in generate_star_features(StellarEvolution.SUPERNOVA_IMMINENT, 'B', rng)
        assert 'intense-radiation' in generate_star_features(StellarEvolution.MAIN_SEQUENCE, 'O', rng)

    def test_planet_count_ranges(self):
        """Planet counts follow stage/class ranges and the binary reduction."""
        from core.attribute_model import planet_count_for
        from core.models import StellarEvolution

        rng = RandomService(seed=9)
        for _ in range(200):
            assert 2 <= planet_count_for(StellarEvolution.MAIN_SEQUENCE, 'G', False, rng) <= 7
            assert 1 <= planet_count_for(StellarEvolution.MAIN_SEQUENCE, 'M', False, rng) <= 5
            assert 0 <= planet_count_for(StellarEvolution.RED_GIANT, 'K', False, rng) <= 2
            assert 0 <= planet_count_for(StellarEvolution.BLACK_HOLE, 'O', False, rng) <= 1
            assert planet_count_for(StellarEvolution.MAIN_SEQUENCE, 'G', True, rng) <= 4
            assert planet_count_for(StellarEvolution.MAIN_SEQUENCE, 'G', False, rng, max_planets=3) <= 3


class TestPlanetAttributes:
    """Tests for planet derivation rules."""

    def test_orbit_spacing(self):
        """Orbit follows 0.4 + 0.3 * 2^index with ±15% jitter."""
        from core.attribute_model import generate_orbit

        rng = RandomService(seed=2)
        for index in range(5):
            base = 0.4 + 0.3 * 2 ** index
            orbit = generate_orbit(index, rng)
            assert base * 0.85 - 0.01 <= orbit <= base * 1.15 + 0.01

    def test_radius_ranges(self):
        """Radius stays inside the range of its size class."""
        from core.attribute_model import calculate_planet_radius

        rng = RandomService(seed=4)
        for _ in range(100):
            assert 0.1 <= calculate_planet_radius('small', rng) <= 0.8
            assert 0.7 <= calculate_planet_radius('medium', rng) <= 1.6
            assert 1.5 <= calculate_planet_radius('large', rng) <= 11.5
        assert calculate_planet_radius('unknown', rng) == 1.0

    def test_planet_type_by_zone(self):
        """Type depends on orbit relative to the habitable zone."""
        from core.attribute_model import determine_planet_type
        from core.models import PlanetType

        low = FixedRandom(0.0)
        high = FixedRandom(0.99)

        assert determine_planet_type(0.1, 'small', 1.0, low) == PlanetType.MOLTEN
        assert determine_planet_type(0.1, 'small', 1.0, high) == PlanetType.ROCKY
        assert determine_planet_type(0.5, 'small', 1.0, low) == PlanetType.ROCKY
        assert determine_planet_type(1.0, 'small', 1.0, low) == PlanetType.TERRESTRIAL
        assert determine_planet_type(2.0, 'large', 1.0, low) == PlanetType.GAS_GIANT
        assert determine_planet_type(2.0, 'small', 1.0, high) == PlanetType.ICE_GIANT
        assert determine_planet_type(10.0, 'large', 1.0, low) == PlanetType.ICE_GIANT
        assert determine_planet_type(10.0, 'small', 1.0, low) == PlanetType.FROZEN
        assert determine_planet_type(1.0, 'small', None, low) == PlanetType.ROCKY

    def test_zero_luminosity_uses_solar_zone(self):
        """Dim stars whose luminosity rounds to 0 use a solar habitable zone."""
        from core.attribute_model import determine_planet_type
        from core.models import PlanetType

        assert determine_planet_type(1.0, 'small', 0.0, FixedRandom(0.0)) == PlanetType.TERRESTRIAL

    def test_mass_and_gravity_consistency(self):
        """mass = radius^3 * density and gravity = mass / radius^2."""
        from core.attribute_model import calculate_planet_mass, calculate_gravity
        from core.models import PlanetType

        mass = calculate_planet_mass(2.0, PlanetType.GAS_GIANT)
        assert mass == round(8 * 0.3, 2)
        assert calculate_gravity(mass, 2.0) == round(mass / 4, 2)
        assert calculate_planet_mass(1.0, PlanetType.TERRESTRIAL) == 1.0

    def test_composition_from_type(self):
        """Composition triple comes from the planet type table."""
        from core.attribute_model import planet_composition
        from core.models import PlanetType

        comp = planet_composition(PlanetType.FROZEN)
        assert (comp.primary, comp.secondary, comp.trace) == ("ice", "rock", "methane")

    def test_atmosphere_by_type(self):
        """Giants always have extreme atmospheres."""
        from core.attribute_model import generate_atmosphere
        from core.models import PlanetType

        rng = RandomService(seed=6)
        assert generate_atmosphere(PlanetType.GAS_GIANT, rng).density == 'extreme'
        assert generate_atmosphere(PlanetType.ICE_GIANT, rng).contains('ammonia')
        assert generate_atmosphere(PlanetType.FROZEN, rng).density == 'thin'
        assert generate_atmosphere(PlanetType.TERRESTRIAL, rng).density in ('moderate', 'thin')

    def test_temperature_greenhouse(self):
        """Carbon dioxide adds 50 K, dense atmospheres 20 K."""
        from core.attribute_model import calculate_planet_temperature
        from core.world_models import Atmosphere

        rng = FixedRandom(0.5)
        bare = calculate_planet_temperature(1.0, 1.0, Atmosphere('none', ['carbon dioxide']), rng)
        co2 = calculate_planet_temperature(1.0, 1.0, Atmosphere('thin', ['carbon dioxide']), rng)
        dense = calculate_planet_temperature(1.0, 1.0, Atmosphere('moderate', ['nitrogen']), rng)

        assert bare == 278
        assert co2 == 328
        assert dense == 298
        assert calculate_planet_temperature(None, 1.0, Atmosphere('none'), rng) == 100

    def test_water_state(self):
        """Verify water state by type and temperature."""
        from core.attribute_model import determine_water
        from core.models import PlanetType

        rng = FixedRandom(0.0)
        assert determine_water(PlanetType.TERRESTRIAL, 400, rng) == 'vapor'
        assert determine_water(PlanetType.TERRESTRIAL, 300, rng) == 'liquid'
        assert determine_water(PlanetType.TERRESTRIAL, 300, FixedRandom(0.9)) == 'ice'
        assert determine_water(PlanetType.FROZEN, 100, rng) == 'ice'
        assert determine_water(PlanetType.GAS_GIANT, 250, rng) == 'vapor-clouds'
        assert determine_water(PlanetType.MOLTEN, 900, rng) == 'none'

    def test_moons_bounded(self):
        """Moon count is below the type maximum scaled by size."""
        from core.attribute_model import generate_moons
        from core.models import PlanetType

        rng = RandomService(seed=8)
        for _ in range(100):
            assert 0 <= generate_moons(PlanetType.GAS_GIANT, 'large', rng) < 30
            assert 0 <= generate_moons(PlanetType.GAS_GIANT, 'small', rng) < 10
            assert 0 <= generate_moons(PlanetType.ROCKY, 'small', rng) < 1

    def test_orbital_period(self):
        """Kepler's third law in years."""
        from core.attribute_model import calculate_orbital_period

        assert calculate_orbital_period(1.0) == 1.0
        assert calculate_orbital_period(4.0) == 8.0

    def test_habitability_terrestrial_only(self):
        """Non-terrestrial planets always score 0."""
        from core.attribute_model import calculate_habitability
        from core.models import PlanetType
        from core.world_models import Atmosphere

        ideal_air = Atmosphere('moderate', ['nitrogen', 'oxygen'])
        for planet_type in PlanetType:
            score = calculate_habitability(planet_type, 300, 'liquid', ideal_air, True)
            if planet_type == PlanetType.TERRESTRIAL:
                assert score == 100
            else:
                assert score == 0

    def test_habitability_partial_scores(self):
        """Tolerable temperature and thin air score less."""
        from core.attribute_model import calculate_habitability
        from core.models import PlanetType
        from core.world_models import Atmosphere

        assert calculate_habitability(PlanetType.TERRESTRIAL, 250, 'ice', Atmosphere('thin', ['oxygen']), False) == 15
        assert calculate_habitability(PlanetType.TERRESTRIAL, 500, 'vapor', Atmosphere('moderate', ['nitrogen']), True) == 30
        assert calculate_habitability(PlanetType.TERRESTRIAL, 323, 'liquid', Atmosphere('none'), False) == 40


class TestCivilizationAttributes:
    """Tests for civilization derivation rules."""

    def test_traits_without_conflicts(self):
        """Traits contain no duplicates and no opposite pairs."""
        from core.attribute_model import select_traits, traits_conflict

        rng = RandomService(seed=12)
        for _ in range(200):
            traits = select_traits(rng)
            assert 1 <= len(traits) <= 4
            for i, a in enumerate(traits):
                for b in traits[i + 1:]:
                    assert not traits_conflict(a, b)

    def test_traits_conflict_rules(self):
        """Opposites conflict in both directions."""
        from core.attribute_model import traits_conflict

        assert traits_conflict('aggressive', 'peaceful')
        assert traits_conflict('peaceful', 'aggressive')
        assert traits_conflict('curious', 'curious')
        assert not traits_conflict('curious', 'spiritual')

    @pytest.mark.parametrize("tech_level", [1, 5, 10])
    def test_specialization_proficiency_clamped(self, tech_level):
        """Proficiency stays within 1..10 and near the tech level."""
        from core.attribute_model import generate_specializations
        from core.world_constants import SPECIALIZATIONS

        rng = RandomService(seed=tech_level)
        for _ in range(50):
            specs = generate_specializations(tech_level, rng)
            assert 1 <= len(specs) <= 3
            for domain, proficiency in specs.items():
                assert domain in SPECIALIZATIONS
                assert 1 <= proficiency <= 10
                assert abs(proficiency - tech_level) <= 1

    def test_expansion_policy_bias(self):
        """Traits bias the expansion policy."""
        from core.attribute_model import choose_expansion_policy
        from core.world_constants import EXPANSION_POLICIES

        rng = RandomService(seed=13)
        assert choose_expansion_policy(['aggressive', 'curious'], rng) == 'conquest'
        assert choose_expansion_policy(['peaceful'], rng) in ('diplomacy', 'trade')
        assert choose_expansion_policy(['expansionist'], rng) in ('colonization', 'conquest')
        assert choose_expansion_policy(['xenophobic'], rng) in ('infiltration', 'conquest')
        assert choose_expansion_policy(['curious'], rng) in EXPANSION_POLICIES

    def test_tech_level_and_age_ranges(self):
        """Tech level in 1..10, age in 1..50 thousand years."""
        from core.attribute_model import generate_tech_level, generate_civilization_age

        rng = RandomService(seed=14)
        for _ in range(100):
            assert 1 <= generate_tech_level(rng) <= 10
            assert 1 <= generate_civilization_age(rng) <= 50
