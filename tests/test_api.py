import pytest

from slidectl.api import (
    GROUP_VERSION,
    GroupVersion,
    ObjectMeta,
    Presentation,
    PresentationList,
    PresentationSpec,
    Slide,
)


def _presentation():
    return Presentation(
        metadata=ObjectMeta(name="talk", namespace="default", uid="uid-1"),
        spec=PresentationSpec(
            slides=[
                Slide(title="One", bullets=["a", "b"], images=["x.png"]),
                Slide(title="Two"),
            ]
        ),
    )


def test_group_version_string():
    assert GROUP_VERSION.api_version() == "presentations.haavard.dev/v1alpha1"


def test_group_version_without_group():
    assert GroupVersion(group="", version="v1").api_version() == "v1"


def test_empty_slide_omits_fields():
    assert Slide().to_dict() == {}


def test_slide_round_trip():
    slide = Slide(title="Hello", bullets=["one", "two"], images=["pic.png"])
    assert Slide.from_dict(slide.to_dict()) == slide


def test_slide_partial_fields():
    assert Slide(title="x").to_dict() == {"title": "x"}


def test_slide_rejects_non_string_bullets():
    with pytest.raises(TypeError):
        Slide.from_dict({"bullets": [1, 2]})


def test_spec_without_slides():
    assert PresentationSpec().to_dict() == {"slides": []}


def test_object_meta_omits_empty():
    assert ObjectMeta(name="x").to_dict() == {"name": "x"}


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="n",
        namespace="ns",
        uid="u",
        labels={"k": "v"},
        owner_references=[{"kind": "Presentation", "name": "n"}],
        deletion_timestamp="2025-01-01T00:00:00Z",
    )
    assert ObjectMeta.from_dict(meta.to_dict()) == meta


def test_presentation_type_fields():
    data = _presentation().to_dict()
    assert data["apiVersion"] == GROUP_VERSION.api_version()
    assert data["kind"] == "Presentation"


def test_presentation_round_trip():
    presentation = _presentation()
    assert Presentation.from_dict(presentation.to_dict()) == presentation


def test_presentation_rejects_other_kind():
    with pytest.raises(ValueError):
        Presentation.from_dict({"kind": "ConfigMap"})


def test_presentation_list_round_trip():
    items = PresentationList(items=[_presentation(), Presentation()])
    data = items.to_dict()
    assert data["kind"] == "PresentationList"
    assert PresentationList.from_dict(data) == items