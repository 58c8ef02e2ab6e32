"""Kubernetes manifests that serve a rendered presentation."""

from __future__ import annotations

from typing import Any

PRES_CONFIG_NAME = "presentation-config"
PRES_CONFIG_PATH = "presentation"
APP_LABEL_VALUE = "md-parser"
APP_LABEL = "app"


def create_markdown_parser(
    name: str, namespace: str, markdown: str
) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    """Return the ConfigMap, Deployment and Service for a presentation."""
    return (
        create_config_map(name, namespace, markdown),
        create_deployment(name, namespace),
        create_service(name, namespace),
    )


def create_config_map(name: str, namespace: str, markdown: str) -> dict[str, Any]:
    """ConfigMap holding the markdown; its name is fixed per namespace."""
    return {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": {"name": PRES_CONFIG_NAME, "namespace": namespace},
        "data": {"presentation.md": markdown},
    }


def create_deployment(name: str, namespace: str) -> dict[str, Any]:
    """Deployment running the slide server over the mounted markdown."""
    labels = {APP_LABEL: APP_LABEL_VALUE}
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "replicas": 1,
            "selector": {"matchLabels": dict(labels)},
            "template": {
                "metadata": {"labels": dict(labels)},
                "spec": {
                    "containers": [
                        {
                            "name": "python",
                            "image": "python:3.13-alpine",
                            "command": ["/bin/sh", "-c"],
                            "args": [f"pip install mkslides && mkslides serve {PRES_CONFIG_PATH}"],
                            "volumeMounts": [
                                {"name": PRES_CONFIG_NAME, "mountPath": PRES_CONFIG_PATH}
                            ],
                        }
                    ],
                    "volumes": [
                        {"name": PRES_CONFIG_NAME, "configMap": {"name": PRES_CONFIG_NAME}}
                    ],
                },
            },
        },
    }


def create_service(name: str, namespace: str) -> dict[str, Any]:
    """Service exposing the slide server on port 80."""
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "selector": {APP_LABEL: APP_LABEL_VALUE},
            "ports": [{"name": "ui", "port": 80, "targetPort": 8000}],
        },
    }