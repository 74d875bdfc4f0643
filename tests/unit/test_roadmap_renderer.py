"""
Unit tests for career_roadmap/roadmap/renderer.py
"""

import pytest

from career_roadmap.common.types import CareerProfile, Phase, RoadmapRecord
from career_roadmap.roadmap.renderer import (
    GENERIC_CLOSING,
    GENERIC_PHASES,
    RoadmapRenderer,
)


@pytest.fixture
def renderer():
    return RoadmapRenderer()


@pytest.fixture
def software_engineer():
    return RoadmapRecord(
        key="Software Engineer",
        title="Software Engineer",
        phases=(
            Phase(
                title="Phase 1: Foundation",
                topics=("Learn programming basics", "Build small projects"),
            ),
        ),
    )


class TestRenderRecord:

    def test_example_document(self, renderer, software_engineer):
        text = renderer.render(software_engineer, "software engineer")

        assert text == (
            "Software Engineer\n"
            "\n"
            "Phase 1: Foundation\n"
            "- Learn programming basics\n"
            "- Build small projects"
        )

    def test_preserves_phase_and_topic_order(self, renderer):
        record = RoadmapRecord(
            key="X",
            title="X",
            phases=(
                Phase(title="P1", topics=("a", "b")),
                Phase(title="P2", topics=("c",)),
            ),
        )

        text = renderer.render(record, "X")

        assert text.index("- a") < text.index("- b") < text.index("P2") < text.index("- c")
        assert "P1\n- a\n- b\n\nP2\n- c" in text

    def test_zero_phases_yields_title_only(self, renderer):
        record = RoadmapRecord(key="Nurse", title="Registered Nurse", phases=())
        assert renderer.render(record, "nurse") == "Registered Nurse"

    def test_phase_without_topics(self, renderer):
        record = RoadmapRecord(
            key="X", title="X", phases=(Phase(title="P1"), Phase(title="P2", topics=("a",)))
        )
        assert renderer.render(record, "X") == "X\n\nP1\n\nP2\n- a"

    def test_uses_record_title_not_query(self, renderer, software_engineer):
        text = renderer.render(software_engineer, "senior software engineer")
        assert text.startswith("Software Engineer\n")
        assert "senior" not in text

    def test_pure(self, renderer, software_engineer):
        assert renderer.render(software_engineer, "a") == renderer.render(software_engineer, "a")


class TestRenderGeneric:

    def test_four_fixed_phases(self, renderer):
        text = renderer.render(None, "Astronaut")

        assert text.startswith("Career Roadmap: Astronaut\n")
        for name in ("Foundation", "Specialization", "Professional Growth", "Leadership"):
            assert name in text
        assert text.endswith(GENERIC_CLOSING)
        assert len(GENERIC_PHASES) == 4

    def test_name_only_in_title(self, renderer):
        text = renderer.render(None, "Zookeeper")
        assert text.count("Zookeeper") == 1
        assert text.splitlines()[0] == "Career Roadmap: Zookeeper"

    def test_identical_except_for_name(self, renderer):
        first = renderer.render(None, "Astronaut")
        second = renderer.render(None, "Pastry Chef")
        assert first.splitlines()[1:] == second.splitlines()[1:]

    def test_name_trimmed_in_title(self, renderer):
        assert renderer.render(None, "  Pilot ").startswith("Career Roadmap: Pilot\n")

    def test_braces_in_name_are_literal(self, renderer):
        assert renderer.render(None, "{career_name}").startswith("Career Roadmap: {career_name}\n")

    def test_pure(self, renderer):
        assert renderer.render(None, "Pilot") == renderer.render(None, "Pilot")


class TestRenderCareerGuide:

    def test_substitutes_profile(self, renderer):
        profile = CareerProfile(
            career="Game Designer",
            skill="Programming",
            hobby="Gaming",
            salary_range="$60,000 - $120,000",
        )

        text = renderer.render_career_guide(profile)

        assert text.startswith("**Game Designer**")
        assert "skills in Programming with interests related to Gaming" in text
        assert "**Salary Range:** $60,000 - $120,000" in text
        assert "prioritize programming capabilities" in text
        assert text.index("Phase 1: Foundation") < text.index("Phase 4: Leadership & Mastery")

    def test_missing_fields_use_neutral_wording(self, renderer):
        text = renderer.render_career_guide(CareerProfile(career="Pilot"))

        assert "skills in your chosen field" in text
        assert "Varies by region and experience" in text

    def test_pure(self, renderer):
        profile = CareerProfile(career="Pilot", skill="Navigation")
        assert renderer.render_career_guide(profile) == renderer.render_career_guide(profile)
