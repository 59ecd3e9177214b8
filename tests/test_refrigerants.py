import pytest

from gcanalyzer.refrigerants import (
    DEFAULT_LABEL,
    ClassificationList,
    ClassificationResult,
    GCReading,
    RefrigerantClassification,
    RefrigerantMixture,
    RefrigerantName,
)


def test_name_normalises_case_and_spaces():
    assert RefrigerantName.parse("r 32") == RefrigerantName.parse("R32")
    assert str(RefrigerantName.parse("r 32")) == "R32"


def test_name_parse_is_idempotent():
    once = RefrigerantName.parse("r 4 10 a")
    assert RefrigerantName.parse(str(once)) == once
    assert " " not in str(once)
    assert str(once) == str(once).upper()


def test_names_are_ordered_and_hashable():
    names = {RefrigerantName.parse("b"), RefrigerantName.parse("a"), RefrigerantName.parse("A")}
    assert len(names) == 2
    assert sorted(names)[0] == RefrigerantName.parse("a")


def test_reading_parse_components():
    reading = GCReading.parse("R32 0.5, r125 0.25")
    assert reading.get_component(RefrigerantName.parse("R32")) == 0.5
    assert reading.get_component(RefrigerantName.parse("R125")) == 0.25
    assert reading.component_set() == {
        RefrigerantName.parse("R32"),
        RefrigerantName.parse("R125"),
    }
    assert dict(reading.components()) == reading.components_map


def test_reading_missing_component_is_none():
    reading = GCReading.parse("R32 1.0")
    assert reading.get_component(RefrigerantName.parse("R22")) is None


@pytest.mark.parametrize("text", ["R32", "R32 abc", "R32 0.5, R125"])
def test_reading_parse_errors(text):
    with pytest.raises(ValueError):
        GCReading.parse(text)


def test_reading_from_dict():
    reading = GCReading.from_dict({"components": {"r 32": 0.7}})
    assert reading.get_component(RefrigerantName.parse("R32")) == 0.7
    with pytest.raises(ValueError):
        GCReading.from_dict({})


def test_mixture_accessors():
    r32 = RefrigerantName.parse("R32")
    r125 = RefrigerantName.parse("R125")
    mix = RefrigerantMixture(RefrigerantName.parse("R410A"), {r32: 0.5, r125: 0.5})
    assert mix.get_component(r32) == 0.5
    assert mix.get_component(RefrigerantName.parse("R22")) is None
    assert mix.component_set() == {r32, r125}
    assert sum(v for _, v in mix.components()) == 1.0
    assert len(mix.classifications) == 0


def test_mixture_from_dict_with_classifications():
    mix = RefrigerantMixture.from_dict(
        {
            "identifier": "r410a",
            "components": {"R32": 0.5, "R125": 0.5},
            "classifications": {
                "Pure": {"purity": 0.99},
                "Blend": {"purity": 0.9, "max_lows": 0.01, "mixed_with": {"r22": 0.1}},
            },
        }
    )
    assert mix.identifier == RefrigerantName.parse("R410A")
    labels = [label for label, _ in mix.classifications]
    assert labels == ["Pure", "Blend"]
    blend = dict(mix.classifications.entries)["Blend"]
    assert blend.max_lows == 0.01
    assert blend.mixed_with == {RefrigerantName.parse("R22"): 0.1}
    assert dict(mix.classifications.entries)["Pure"].max_lows is None


def test_mixture_from_dict_missing_field():
    with pytest.raises(ValueError):
        RefrigerantMixture.from_dict({"identifier": "R32"})


def test_classification_requires_purity():
    with pytest.raises(ValueError):
        RefrigerantClassification.from_dict({"max_lows": 0.1})


def test_classification_equality_is_identity():
    a = RefrigerantClassification(0.9)
    b = RefrigerantClassification(0.9)
    assert a == a
    assert a != b


def test_classification_list_from_mapping_keeps_objects():
    c = RefrigerantClassification(0.5)
    lst = ClassificationList.from_mapping({"x": c})
    assert lst.entries[0][1] is c


def test_classification_result_display():
    result = ClassificationResult(
        label=DEFAULT_LABEL,
        origin=RefrigerantName.parse("R32"),
        purity=0.995,
        components={RefrigerantName.parse("R32"): 0.995},
    )
    assert str(result) == (
        "Origin: R32, Classified Label: Mixed, Purity: 99.500%, 1 total components."
    )