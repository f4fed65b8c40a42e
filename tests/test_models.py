# tests/test_models.py
"""
Tests for core models - generation options, graph schema and the universe aggregate.
"""
import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestGenerationOptions:
    """Tests for GenerationOptions model."""

    def test_defaults(self):
        """Verify default options."""
        from core.models import GalaxyType, GenerationOptions

        options = GenerationOptions()

        assert options.galaxy_type == GalaxyType.SPIRAL
        assert options.star_count == 100
        assert options.civ_probability == 0.1

    def test_camel_case_keys(self):
        """Keys sent by the web client are accepted."""
        from core.models import GalaxyType, GenerationOptions

        options = GenerationOptions.from_mapping({
            "galaxyType": "Elliptical",
            "starCount": 250,
            "civProbability": 0.4,
        })

        assert options.galaxy_type == GalaxyType.ELLIPTICAL
        assert options.star_count == 250
        assert options.civ_probability == 0.4

    def test_snake_case_keys(self):
        """Field names work as well as aliases."""
        from core.models import GalaxyType, GenerationOptions

        options = GenerationOptions(galaxy_type="test", star_count=5)
        assert options.galaxy_type == GalaxyType.TEST

    def test_none_mapping_uses_defaults(self):
        """An empty or missing mapping gives defaults."""
        from core.models import GenerationOptions

        assert GenerationOptions.from_mapping(None) == GenerationOptions()

    @pytest.mark.parametrize("data", [
        {"galaxyType": "ring"},
        {"starCount": 0},
        {"civProbability": -0.1},
        {"civProbability": 1.01},
    ])
    def test_invalid_values(self, data):
        """Out-of-range values are rejected by validation."""
        from pydantic import ValidationError
        from core.models import GenerationOptions

        with pytest.raises(ValidationError):
            GenerationOptions.from_mapping(data)


class TestGalaxyGraph:
    """Tests for the render graph schema."""

    def _graph(self):
        from core.models import GalaxyGraph, GraphLink, GraphNode, NodeType

        return GalaxyGraph(
            nodes=[
                GraphNode(id="star-1", name="Sol", type=NodeType.STAR, color="#fff4ea"),
                GraphNode(id="planet-1", name="Terra", type=NodeType.PLANET, color="#4CAF50", val=1.5),
            ],
            links=[GraphLink(source="star-1", target="planet-1", color="#555555")],
        )

    def test_lookup_helpers(self):
        """Nodes can be found by id and filtered by type."""
        from core.models import NodeType

        graph = self._graph()

        assert graph.node_ids() == ["star-1", "planet-1"]
        assert graph.get_node("planet-1").name == "Terra"
        assert graph.get_node("missing") is None
        assert [n.id for n in graph.nodes_of_type(NodeType.STAR)] == ["star-1"]

    def test_serialization(self):
        """model_dump produces plain values for the render layer."""
        dumped = self._graph().model_dump(mode="json")

        assert dumped["nodes"][0]["type"] == "star"
        assert dumped["links"][0] == {
            "source": "star-1", "target": "planet-1", "color": "#555555", "width": 0.1, "dashed": False,
        }

    def test_camel_case_output(self):
        """Dumping by alias uses the render layer's propertiesRef key."""
        from core.models import GraphNode, NodeType

        node = GraphNode(id="star-1", name="Sol", type=NodeType.STAR, color="#fff4ea", properties_ref="star-1")
        dumped = node.model_dump(mode="json", by_alias=True)

        assert dumped["propertiesRef"] == "star-1"
        assert "properties_ref" not in dumped
        assert node.model_dump()["properties_ref"] == "star-1"


class TestArtifact:
    """Tests for the immutable artifact record."""

    def test_properties_are_read_only(self):
        """Artifact properties cannot be changed after creation."""
        from core.models import ArtifactType
        from core.world_models import Artifact

        artifact = Artifact("artifact-1", ArtifactType.ANCIENT_RUINS, "planet-1", {"age": 7000})

        with pytest.raises(TypeError):
            artifact.properties["age"] = 1
        assert artifact.properties["age"] == 7000

    def test_properties_are_copied(self):
        """Changing the source mapping later does not reach the artifact."""
        from core.models import ArtifactType
        from core.world_models import Artifact

        source = {"name": "Halo"}
        artifact = Artifact("artifact-1", ArtifactType.MEGASTRUCTURE, None, source)
        source["name"] = "Changed"

        assert artifact.name == "Halo"
        assert artifact.properties == {"name": "Halo"}


class TestUniverse:
    """Tests for the Universe aggregate and its id indexes."""

    def _planet(self, planet_id, star_id="star-1"):
        from core.models import PlanetType
        from core.world_models import Atmosphere, Composition, Planet

        return Planet(
            id=planet_id, name=planet_id, star_id=star_id, index=0, orbit=1.0,
            size="medium", radius=1.0, mass=1.0, gravity=1.0, type=PlanetType.ROCKY,
            composition=Composition("silicate", "metal", "carbon"), atmosphere=Atmosphere("thin", ["nitrogen"]),
            temperature=250, water="ice", moons=0, day_length=20.0, orbital_period=1.0,
            magnetic_field=False, rings=False,
        )

    def _star(self, star_id="star-1"):
        from core.models import StellarEvolution
        from core.world_models import Coordinates, Star

        return Star(
            id=star_id, name=star_id, mass=1.0, luminosity=1.0, temperature=7000,
            size="medium", spectral_type="F", age=1.0, rotation=20.0,
            coordinates=Coordinates(), evolution=StellarEvolution.MAIN_SEQUENCE,
        )

    def _universe(self, **kwargs):
        from core.models import GalaxyType
        from core.world_models import Universe, UniverseMetadata

        return Universe(metadata=UniverseMetadata(GalaxyType.SPIRAL, "2026-01-01T00:00:00"), **kwargs)

    def test_constructor_indexes_entities(self):
        """Stars and planets passed to the constructor are resolvable."""
        star = self._star()
        star.planets.append(self._planet("planet-1"))
        universe = self._universe(stars=[star])

        assert universe.get_star("star-1") is star
        assert universe.get_planet("planet-1").star_id == "star-1"
        assert universe.star_of(universe.get_planet("planet-1")) is star

    def test_add_civilization_links_home(self):
        """Registering a civilization marks its home planet."""
        from core.world_models import Civilization

        universe = self._universe()
        star = self._star()
        universe.add_star(star)
        universe.attach_planet(star, self._planet("planet-1"))
        civ = Civilization(
            id="civ-1", name="Zarian", home_planet_id="planet-1", technological_level=3, age=5,
            traits=["curious"], specializations={}, government="tribal", expansion_policy="trade",
        )

        universe.add_civilization(civ)

        assert civ.planet_ids == ["planet-1"]
        assert universe.get_planet("planet-1").civilization_id == "civ-1"
        assert universe.home_star_of(civ) is star
        assert universe.get_civilization("civ-1") is civ
        assert universe.get_civilization(None) is None

    def test_artifact_cap(self):
        """A planet never holds more than MAX_ARTIFACTS_PER_PLANET artifacts."""
        from config.app_constants import MAX_ARTIFACTS_PER_PLANET
        from core.models import ArtifactType
        from core.world_models import Artifact

        planet = self._planet("planet-1")
        results = [
            planet.add_artifact(Artifact(f"artifact-{i}", ArtifactType.ANOMALY, planet.id))
            for i in range(MAX_ARTIFACTS_PER_PLANET + 2)
        ]

        assert results.count(True) == MAX_ARTIFACTS_PER_PLANET
        assert len(planet.artifacts) == MAX_ARTIFACTS_PER_PLANET
        assert not planet.has_artifact_room()

    def test_refresh_metadata(self):
        """Counts reflect the current contents."""
        universe = self._universe()
        star = self._star()
        universe.add_star(star)
        habitable = self._planet("planet-1")
        habitable.habitability = 80
        universe.attach_planet(star, habitable)
        universe.attach_planet(star, self._planet("planet-2"))

        meta = universe.refresh_metadata()

        assert meta.star_count == 1
        assert meta.planet_count == 2
        assert meta.habitable_planets == 1
        assert meta.civilization_count == 0


class TestExceptions:
    """Tests for custom exception classes."""

    def test_base_exception(self):
        """Test base GalaxyForgeException."""
        from core.exceptions import GalaxyForgeException

        exc = GalaxyForgeException("Test error", {"key": "value"})

        assert exc.message == "Test error"
        assert exc.details == {"key": "value"}
        assert "Test error" in str(exc)
        assert "key" in str(exc)

    def test_setup_error(self):
        """Test GenerationSetupError exception."""
        from core.exceptions import GenerationSetupError

        exc = GenerationSetupError("Missing services", {"missing": ["rng"]})

        assert exc.message == "Missing services"
        assert exc.details["missing"] == ["rng"]
        assert exc.report_message == "Error: Missing services"

    def test_all_exception_types_exist(self):
        """Verify all custom exception types are defined."""
        from core.exceptions import (
            GalaxyForgeException,
            EntityConstructionError,
            GenerationSetupError,
            ProjectionError,
        )

        assert issubclass(EntityConstructionError, GalaxyForgeException)
        assert issubclass(GenerationSetupError, GalaxyForgeException)
        assert issubclass(ProjectionError, GalaxyForgeException)
