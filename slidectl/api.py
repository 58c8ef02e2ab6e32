"""Resource types of the presentations API group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class GroupVersion:
    """An API group paired with a version."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the ``apiVersion`` string for this group and version."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="presentations.haavard.dev", version="v1alpha1")


def _str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{field_name} must be a list of strings")
    return list(value)


def _str(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string")
    return value


@dataclass
class Slide:
    """One slide: a title, bullet points and images."""

    title: str = ""
    bullets: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.title:
            data["title"] = self.title
        if self.bullets:
            data["bullets"] = list(self.bullets)
        if self.images:
            data["images"] = list(self.images)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Slide:
        return cls(
            title=_str(data.get("title"), "title"),
            bullets=_str_list(data.get("bullets"), "bullets"),
            images=_str_list(data.get("images"), "images"),
        )


@dataclass
class PresentationSpec:
    """Desired state of a presentation."""

    slides: list[Slide] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"slides": [slide.to_dict() for slide in self.slides]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PresentationSpec:
        slides = data.get("slides") or []
        if not isinstance(slides, list):
            raise TypeError("slides must be a list")
        return cls(slides=[Slide.from_dict(slide) for slide in slides])


@dataclass
class PresentationStatus:
    """Observed state of a presentation; it carries no fields."""

    def to_dict(self) -> dict[str, Any]:
        return {}


@dataclass
class ObjectMeta:
    """The metadata part of a resource."""

    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    owner_references: list[dict[str, Any]] = field(default_factory=list)
    deletion_timestamp: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.namespace:
            data["namespace"] = self.namespace
        if self.uid:
            data["uid"] = self.uid
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.owner_references:
            data["ownerReferences"] = [dict(ref) for ref in self.owner_references]
        if self.deletion_timestamp is not None:
            data["deletionTimestamp"] = self.deletion_timestamp
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ObjectMeta:
        return cls(
            name=_str(data.get("name"), "name"),
            namespace=_str(data.get("namespace"), "namespace"),
            uid=_str(data.get("uid"), "uid"),
            labels=dict(data.get("labels") or {}),
            owner_references=[dict(ref) for ref in data.get("ownerReferences") or []],
            deletion_timestamp=data.get("deletionTimestamp"),
        )


def _check_kind(data: Mapping[str, Any], kind: str) -> None:
    found = data.get("kind")
    if found is not None and found != kind:
        raise ValueError(f"expected kind {kind!r}, got {found!r}")


@dataclass
class Presentation:
    """A presentation resource."""

    KIND = "Presentation"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: PresentationSpec = field(default_factory=PresentationSpec)
    status: PresentationStatus = field(default_factory=PresentationStatus)

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": GROUP_VERSION.api_version(),
            "kind": self.KIND,
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Presentation:
        _check_kind(data, cls.KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata") or {}),
            spec=PresentationSpec.from_dict(data.get("spec") or {}),
            status=PresentationStatus(),
        )


@dataclass
class PresentationList:
    """A list of presentation resources."""

    KIND = "PresentationList"

    items: list[Presentation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": GROUP_VERSION.api_version(),
            "kind": self.KIND,
            "metadata": {},
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PresentationList:
        _check_kind(data, cls.KIND)
        return cls(items=[Presentation.from_dict(item) for item in data.get("items") or []])