from typing import Annotated

import pytest

from propinspect import (
    AnalysisGeneralError,
    AnalysisReflectionError,
    AttributeAnalyzer,
    ProcessableAttribute,
    Rule,
    TypeMetadataCache,
    rule,
)


class Required(ProcessableAttribute):
    def get_processors(self):
        return ["required"]


class User:
    name: Annotated[str, rule("trim")]
    email: Annotated[str, rule("trim"), "not metadata", rule("email")]
    age: int
    nickname: Annotated[str, "plain annotation"]
    __token: Annotated[str, rule("trim")]

    def __init__(self, name="  Bob  ", email="bob@example.com", token="t0k3n"):
        self.name = name
        self.email = email
        self.age = 30
        self.nickname = "bobby"
        self.__token = token


class Admin(User):
    role: Annotated[str, Required]

    def __init__(self, role="root", **kwargs):
        super().__init__(**kwargs)
        self.role = role


class Broken:
    value: "Annotated[str, UndefinedMetadata]"  # noqa: F821


class Unset:
    name: Annotated[str, rule("trim")]


@pytest.fixture
def analyzer() -> AttributeAnalyzer:
    return AttributeAnalyzer(ProcessableAttribute)


def test_analyze_object_returns_only_properties_with_matching_metadata(analyzer):
    """Properties without matching metadata are omitted."""
    result = analyzer.analyze_object(User())

    assert list(result) == ["name", "email", "_User__token"]
    assert result["name"].value == "  Bob  "
    assert len(result["name"].attributes) == 1
    assert len(result["email"].attributes) == 2
    assert all(isinstance(a, Rule) for a in result["email"].attributes)


def test_analyze_object_reads_private_properties(analyzer):
    result = analyzer.analyze_object(User(token="secret"))

    assert result["_User__token"].value == "secret"


def test_analyze_object_walks_base_classes_first(analyzer):
    """Inherited properties come first, then the subclass's own."""
    result = analyzer.analyze_object(Admin())

    assert list(result) == ["name", "email", "_User__token", "role"]


def test_metadata_given_as_class_is_instantiated(analyzer):
    result = analyzer.analyze_object(Admin())

    (attribute,) = result["role"].attributes
    assert isinstance(attribute, Required)
    assert attribute.get_processors() == ["required"]


def test_metadata_matches_by_instance_of_selected_class():
    """Selecting Rule excludes other processable metadata."""
    analyzer = AttributeAnalyzer(Rule)

    result = analyzer.analyze_object(Admin())

    assert "role" not in result
    assert "name" in result


def test_attribute_class_must_be_a_class():
    with pytest.raises(TypeError, match="must be a class"):
        AttributeAnalyzer("ProcessableAttribute")


def test_values_are_read_per_instance(analyzer):
    """The shape is cached per type, values are not."""
    first = analyzer.analyze_object(User(name="Alice"))
    second = analyzer.analyze_object(User(name="Carol"))

    assert first["name"].value == "Alice"
    assert second["name"].value == "Carol"
    assert first["name"].attributes == second["name"].attributes


def test_discovery_runs_once_per_type(analyzer, monkeypatch):
    calls = []
    discover = analyzer._discover
    monkeypatch.setattr(analyzer, "_discover", lambda cls: calls.append(cls) or discover(cls))

    analyzer.analyze_object(User())
    analyzer.analyze_object(User(name="Other"))

    assert calls == [User]


def test_cache_is_populated_and_cleared(analyzer):
    before = analyzer.analyze_object(User())
    assert User in analyzer.cache
    assert len(analyzer.cache) == 1

    analyzer.clear_cache()
    assert User not in analyzer.cache
    assert len(analyzer.cache) == 0

    after = analyzer.analyze_object(User())
    assert User in analyzer.cache
    assert list(after) == list(before)
    assert [len(e.attributes) for e in after.values()] == [
        len(e.attributes) for e in before.values()
    ]


def test_cache_can_be_shared_between_analyzers():
    cache = TypeMetadataCache()
    AttributeAnalyzer(ProcessableAttribute, cache=cache).analyze_object(User())

    other = AttributeAnalyzer(ProcessableAttribute, cache=cache)

    assert other.cache is cache
    assert User in other.cache


def test_type_without_metadata_yields_empty_result(analyzer):
    class Plain:
        value: int = 1

    assert analyzer.analyze_object(Plain()) == {}
    assert Plain in analyzer.cache


def test_unresolvable_annotation_raises_reflection_error(analyzer):
    with pytest.raises(AnalysisReflectionError) as excinfo:
        analyzer.analyze_object(Broken())

    assert isinstance(excinfo.value.__cause__, NameError)
    assert excinfo.value.code == 2501
    assert excinfo.value.error_code == "REFLECTION_ANALYSIS_ERROR"
    assert Broken not in analyzer.cache


def test_failure_reading_value_raises_general_error(analyzer):
    with pytest.raises(AnalysisGeneralError) as excinfo:
        analyzer.analyze_object(Unset())

    assert isinstance(excinfo.value.__cause__, AttributeError)
    assert excinfo.value.code == 2503


def test_failure_instantiating_metadata_raises_general_error(analyzer):
    class Abstract(ProcessableAttribute):
        pass

    class WithAbstract:
        value: Annotated[str, Abstract] = "x"

    with pytest.raises(AnalysisGeneralError) as excinfo:
        analyzer.analyze_object(WithAbstract())

    assert isinstance(excinfo.value.__cause__, TypeError)
    assert WithAbstract not in analyzer.cache


def test_cache_set_and_get():
    cache = TypeMetadataCache()
    shape = AttributeAnalyzer(ProcessableAttribute)._discover(User)

    assert cache.get(User) is None
    cache.set(User, shape)

    assert User in cache
    assert cache.get(User) == shape
    assert cache.get_or_create(User, lambda cls: pytest.fail("rediscovered")) == shape
