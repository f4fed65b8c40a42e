# tests/test_constants.py
"""
Tests for application and world constants.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestStarConstants:
    """Tests for star-related constants."""

    def test_spectral_types_exist(self):
        """Verify SPECTRAL_TYPES is defined with all spectral classes."""
        from core.world_constants import SPECTRAL_TYPES

        assert len(SPECTRAL_TYPES) == 7
        for star_class in ["O", "B", "A", "F", "G", "K", "M"]:
            assert star_class in SPECTRAL_TYPES

    def test_spectral_types_have_required_fields(self):
        """Verify each spectral type has the fields the projection and factories use."""
        from core.world_constants import SPECTRAL_TYPES

        required_fields = ['color', 'temp_min', 'temp_max', 'mass_min', 'mass_max']

        for star_class, data in SPECTRAL_TYPES.items():
            for field in required_fields:
                assert field in data, f"SPECTRAL_TYPES['{star_class}'] missing '{field}'"

    def test_mass_buckets_are_cumulative(self):
        """Bucket probabilities rise to 1.0 and stay within the mass range."""
        from core.world_constants import STAR_MASS_BUCKETS, STAR_MASS_MIN, STAR_MASS_MAX

        cumulative = [bucket[0] for bucket in STAR_MASS_BUCKETS]
        assert cumulative == sorted(cumulative)
        assert cumulative[-1] == 1.0
        for _, low, high in STAR_MASS_BUCKETS:
            assert STAR_MASS_MIN <= low < high <= STAR_MASS_MAX

    def test_temperature_thresholds_descend(self):
        """Thresholds are checked hottest first."""
        from core.world_constants import SPECTRAL_TEMPERATURE_THRESHOLDS

        temps = [t for _, t in SPECTRAL_TEMPERATURE_THRESHOLDS]
        assert temps == sorted(temps, reverse=True)


class TestPlanetConstants:
    """Tests for planet-related constants."""

    def test_planet_types_match_enum(self):
        """Every PlanetType has a color and composition entry."""
        from core.models import PlanetType
        from core.world_constants import PLANET_TYPES

        for planet_type in PlanetType:
            assert planet_type.value in PLANET_TYPES
            assert 'color' in PLANET_TYPES[planet_type.value]
            assert len(PLANET_TYPES[planet_type.value]['composition']) == 3

    def test_habitability_weights_reach_cap(self):
        """The best possible planet scores exactly the cap."""
        from core.world_constants import (
            HABITABILITY_TEMP_IDEAL,
            HABITABILITY_LIQUID_WATER,
            HABITABILITY_MODERATE_ATMOSPHERE,
            HABITABILITY_OXYGEN,
            HABITABILITY_MAGNETIC_FIELD,
            HABITABILITY_CAP,
        )

        best = (HABITABILITY_TEMP_IDEAL[2] + HABITABILITY_LIQUID_WATER + HABITABILITY_MODERATE_ATMOSPHERE
                + HABITABILITY_OXYGEN + HABITABILITY_MAGNETIC_FIELD)
        assert best == HABITABILITY_CAP


class TestCivilizationConstants:
    """Tests for civilization vocabularies."""

    def test_trait_opposites_are_known_traits(self):
        """Both sides of every opposite pair are real traits."""
        from core.world_constants import CIVILIZATION_TRAITS, TRAIT_OPPOSITES

        for trait, opposite in TRAIT_OPPOSITES.items():
            assert trait in CIVILIZATION_TRAITS
            assert opposite in CIVILIZATION_TRAITS

    def test_every_policy_has_description(self):
        """Descriptions cover every expansion policy."""
        from core.world_constants import EXPANSION_POLICIES, EXPANSION_POLICY_DESCRIPTIONS

        assert set(EXPANSION_POLICIES) == set(EXPANSION_POLICY_DESCRIPTIONS)

    def test_tech_gates_increase(self):
        """Orbital stations unlock before networks, networks before megastructures."""
        from core.world_constants import CIV_ORBITAL_STATION, CIV_TRANSPORT_NETWORK, CIV_MEGASTRUCTURE

        assert CIV_ORBITAL_STATION[0] < CIV_TRANSPORT_NETWORK[0] < CIV_MEGASTRUCTURE[0]


class TestArtifactConstants:
    """Tests for artifact tables."""

    def test_standalone_types_have_tables(self):
        """Standalone artifacts have property tables."""
        from core.world_constants import ARTIFACT_PROPERTY_TABLES, STANDALONE_ARTIFACT_TYPES

        for artifact_type in STANDALONE_ARTIFACT_TYPES:
            assert artifact_type in ARTIFACT_PROPERTY_TABLES

    def test_relationship_colors_cover_tags(self):
        """Every relationship tag has a link color."""
        from core.models import RelationshipTag
        from core.world_constants import RELATIONSHIP_COLORS

        for tag in RelationshipTag:
            assert tag.value in RELATIONSHIP_COLORS


class TestAppConstants:
    """Tests for generation limits and the progress layout."""

    def test_progress_ranges_are_contiguous(self):
        """Stage ranges tile 0-100 without gaps."""
        from config.app_constants import (
            PROGRESS_STARS,
            PROGRESS_PLANETS,
            PROGRESS_CIVILIZATIONS,
            PROGRESS_RELATIONSHIPS,
            PROGRESS_EXPANSION,
            PROGRESS_ARTIFACTS,
            PROGRESS_FINALIZE,
        )

        stages = [PROGRESS_STARS, PROGRESS_PLANETS, PROGRESS_CIVILIZATIONS, PROGRESS_RELATIONSHIPS,
                  PROGRESS_EXPANSION, PROGRESS_ARTIFACTS, PROGRESS_FINALIZE]
        assert stages[0][0] == 0
        assert stages[-1][1] == 100
        for previous, current in zip(stages, stages[1:]):
            assert previous[1] == current[0]

    def test_progress_ceiling_below_100(self):
        """Only finalization may report 100."""
        from config.app_constants import PROGRESS_CEILING

        assert PROGRESS_CEILING < 100

    @pytest.mark.parametrize("name,value", [
        ("MAX_STARS", 3000),
        ("MAX_PLANETS_PER_STAR", 9),
        ("MAX_CIVILIZATIONS", 50),
        ("MAX_ARTIFACTS_PER_PLANET", 2),
        ("BATCH_SIZE", 10),
    ])
    def test_generation_limits(self, name, value):
        """Verify the generation limits."""
        import config.app_constants as constants

        assert getattr(constants, name) == value


class TestGalaxyGeneratorImports:
    """Tests to verify galaxy_generator can import all required constants."""

    def test_galaxy_generator_imports_succeed(self):
        """Verify galaxy_generator.py can import without ImportError."""
        try:
            from core.galaxy_generator import GalaxyGenerator
        except ImportError as e:
            pytest.fail(f"galaxy_generator failed to import: {e}")

    def test_galaxy_generator_can_instantiate(self):
        """Verify GalaxyGenerator can be instantiated."""
        from core.galaxy_generator import GalaxyGenerator
        from core.models import GenerationOptions
        from utils.name_generator import NameGenerator
        from utils.random_utils import RandomService

        rng = RandomService(seed=42)
        gen = GalaxyGenerator(GenerationOptions(star_count=5), rng, NameGenerator(rng))
        assert gen.options.star_count == 5
        assert gen.universe is None
