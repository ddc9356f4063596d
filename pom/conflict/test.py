"""Unit tests for utility class conflict resolution."""

import pytest

from pom.config import configure, get_conflict_resolver

from .lib import ClassConflictResolver, TailwindClassResolver


@pytest.fixture
def resolver() -> TailwindClassResolver:
    return TailwindClassResolver()


class TestTailwindClassResolver:
    """Tests for the tailwind-merge backed resolver."""

    @pytest.mark.unit
    def test_satisfies_protocol(self, resolver):
        """The default resolver satisfies the resolver contract."""
        assert isinstance(resolver, ClassConflictResolver)

    @pytest.mark.unit
    def test_last_conflicting_token_wins(self, resolver):
        """Later padding and background replace earlier ones."""
        assert resolver.merge("p-4 bg-blue-500 p-6 bg-red-500") == "p-6 bg-red-500"

    @pytest.mark.unit
    def test_text_color_and_alignment_are_separate_groups(self, resolver):
        """Alignment and color conflicts resolve independently."""
        merged = resolver.merge("text-left text-blue-500 text-right text-red-500")
        assert merged == "text-right text-red-500"

    @pytest.mark.unit
    def test_shorthand_supersedes_earlier_longhand(self, resolver):
        """p-4 after px-2 and py-1 removes both."""
        assert resolver.merge("px-2 py-1 p-4") == "p-4"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "classes",
        [
            "object-cover object-center",
            "list-disc list-inside",
            "decoration-2 decoration-red-500",
            "ring-offset-2 ring-offset-red-500",
            "snap-x snap-mandatory",
            "space-x-4 space-x-reverse",
            "text-sm text-white",
        ],
    )
    def test_distinct_properties_kept(self, resolver, classes):
        """Utilities sharing a prefix but not a property both survive."""
        assert resolver.merge(classes) == classes

    @pytest.mark.unit
    def test_modifiers_scope_conflicts(self, resolver):
        """hover: classes only conflict with other hover: classes."""
        merged = resolver.merge("opacity-50 hover:opacity-80 hover:opacity-90")
        assert merged == "opacity-50 hover:opacity-90"

    @pytest.mark.unit
    @pytest.mark.parametrize("classes", ["", "   "])
    def test_blank_input(self, resolver, classes):
        """Blank input produces empty output."""
        assert resolver.merge(classes) == ""

    @pytest.mark.unit
    def test_injected_merger(self):
        """A preconfigured merger receives the class string."""
        calls = []

        class RecordingMerger:
            def merge(self, classes):
                calls.append(classes)
                return "merged"

        assert TailwindClassResolver(merger=RecordingMerger()).merge("p-4 p-2") == "merged"
        assert calls == ["p-4 p-2"]


class TestResolverSwap:
    """Tests for replacing the default resolver through configuration."""

    @pytest.mark.unit
    def test_default_is_tailwind(self):
        """Without configuration the tailwind-merge resolver is active."""
        assert isinstance(get_conflict_resolver(), TailwindClassResolver)

    @pytest.mark.unit
    def test_configured_resolver_used(self):
        """Any object with merge() can replace the default."""

        class KeepAll:
            def merge(self, classes: str) -> str:
                return classes

        configure(conflict_resolver=KeepAll())
        assert isinstance(get_conflict_resolver(), ClassConflictResolver)
        assert get_conflict_resolver().merge("p-4 p-6") == "p-4 p-6"
