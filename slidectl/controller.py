"""Reconciler that keeps a presentation's workload in step with its spec."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from slidectl.api import GROUP_VERSION, Presentation
from slidectl.manifests import create_markdown_parser
from slidectl.render import render_markdown

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised by a client when the requested object does not exist."""


class _Client(Protocol):
    def get(self, kind: str, namespace: str, name: str) -> dict[str, Any]: ...

    def create(self, obj: dict[str, Any]) -> None: ...

    def update(self, obj: dict[str, Any]) -> None: ...


@dataclass(frozen=True)
class Request:
    """Names the object to reconcile."""

    name: str
    namespace: str


@dataclass(frozen=True)
class Result:
    """Outcome of one reconcile pass."""

    requeue: bool = False
    requeue_after: float | None = None


def _group(api_version: str) -> str:
    return api_version.split("/", 1)[0] if "/" in api_version else ""


def _same_owner(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    return (
        _group(a.get("apiVersion", "")) == _group(b.get("apiVersion", ""))
        and a.get("kind") == b.get("kind")
        and a.get("name") == b.get("name")
    )


def set_controller_reference(owner: Presentation, obj: dict[str, Any]) -> None:
    """Mark ``owner`` as the managing controller of ``obj``."""
    meta = obj.setdefault("metadata", {})
    owner_ns = owner.metadata.namespace
    if owner_ns and meta.get("namespace", "") != owner_ns:
        raise ValueError(
            "cross-namespace owner references are disallowed, owner's namespace "
            f"{owner_ns}, obj's namespace {meta.get('namespace', '')}"
        )
    ref = {
        "apiVersion": GROUP_VERSION.api_version(),
        "kind": Presentation.KIND,
        "name": owner.metadata.name,
        "uid": owner.metadata.uid,
        "blockOwnerDeletion": True,
        "controller": True,
    }
    refs = meta.setdefault("ownerReferences", [])
    for existing in refs:
        if existing.get("controller") and not _same_owner(existing, ref):
            raise ValueError(
                f"object {meta.get('namespace', '')}/{meta.get('name', '')} is already "
                f"owned by another {existing.get('kind')} controller {existing.get('name')}"
            )
    for index, existing in enumerate(refs):
        if _same_owner(existing, ref):
            refs[index] = ref
            return
    refs.append(ref)


class PresentationReconciler:
    """Reconciles Presentation objects through a client."""

    def __init__(self, client: _Client) -> None:
        self.client = client

    def reconcile(self, request: Request) -> Result:
        try:
            data = self.client.get(Presentation.KIND, request.namespace, request.name)
        except NotFoundError:
            logger.info("not found, ignoring")
            return Result()

        presentation = data if isinstance(data, Presentation) else Presentation.from_dict(data)
        if presentation.metadata.deletion_timestamp is not None:
            logger.info("Skipping reconcile as the resource is being deleted")
            return Result()

        rendered = render_markdown(presentation.spec)
        self.setup_presentation(request, presentation, rendered)
        return Result()

    def setup_presentation(
        self, request: Request, presentation: Presentation, rendered: str
    ) -> None:
        objects = create_markdown_parser(request.name, request.namespace, rendered)
        for obj in objects:
            try:
                set_controller_reference(presentation, obj)
            except ValueError:
                logger.error("unable to set controller reference for %s", obj["kind"])
                raise
        config_map, deployment, service = objects
        self._apply(config_map, "data")
        self._apply(deployment, "spec")
        self._apply(service, "spec")

    def _apply(self, obj: dict[str, Any], field: str) -> None:
        kind = obj["kind"]
        meta = obj["metadata"]
        try:
            existing = self.client.get(kind, meta["namespace"], meta["name"])
        except NotFoundError:
            try:
                self.client.create(obj)
            except Exception:
                logger.error("unable to create %s", kind)
                raise
            return
        except Exception:
            logger.error("unable to get %s", kind)
            raise
        existing[field] = obj[field]
        try:
            self.client.update(existing)
        except Exception:
            logger.error("unable to update %s", kind)
            raise