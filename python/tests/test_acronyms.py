"""
Tests for lexshift.inflection.acronyms - the acronym registry.
"""

import pytest

from lexshift.inflection.acronyms import AcronymRegistry


class TestAcronymRegistry:
    """Tests for lookups and derived patterns."""

    def test_lookup_by_lowercase_key(self):
        """lookup() should use the exact lowercase key."""
        registry = AcronymRegistry({"html": "HTML", "phd": "PhD"})
        assert registry.lookup("html") == "HTML"
        assert registry.lookup("HTML") is None
        assert registry.lookup_word("HTML") == "HTML"
        assert registry.lookup_word("Phd") == "PhD"

    def test_mapping_is_copied_and_frozen(self):
        """Changing the source dict must not leak into the registry."""
        source = {"api": "API"}
        registry = AcronymRegistry(source)
        source["sql"] = "SQL"
        assert registry.lookup("sql") is None
        with pytest.raises(TypeError):
            registry.acronyms["xml"] = "XML"

    def test_pattern_prefers_longest_acronym(self):
        """'RESTful' should be tried before 'REST'."""
        registry = AcronymRegistry({"rest": "REST", "restful": "RESTful"})
        match = registry.underscore_re.search("RESTfulController")
        assert match.group(2) == "RESTful"

    def test_empty_registry_never_matches(self):
        """With no acronyms the derived patterns should not match anything acronym-like."""
        registry = AcronymRegistry()
        assert not registry.acronyms
        assert registry.underscore_re.search("HTMLTidy") is None
        assert registry.lower_first_re.match("HTMLTidy").group(0) == "H"

    def test_underscore_pattern_respects_word_continuation(self):
        """An acronym followed by lowercase letters is part of a longer word."""
        registry = AcronymRegistry({"ror": "RoR"})
        assert registry.underscore_re.search("RoRails") is None
        assert registry.underscore_re.search("IRoRU").group(2) == "RoR"
