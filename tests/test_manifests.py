from slidectl.manifests import (
    create_config_map,
    create_deployment,
    create_markdown_parser,
    create_service,
)


def test_config_map_holds_markdown():
    config_map = create_config_map("talk", "ns", "# hi")
    assert config_map["metadata"] == {"name": "presentation-config", "namespace": "ns"}
    assert config_map["data"] == {"presentation.md": "# hi"}


def test_deployment_container():
    deployment = create_deployment("talk", "ns")
    assert deployment["metadata"] == {"name": "talk", "namespace": "ns"}
    spec = deployment["spec"]
    assert spec["replicas"] == 1
    container = spec["template"]["spec"]["containers"][0]
    assert container["image"] == "python:3.13-alpine"
    assert container["args"] == ["pip install mkslides && mkslides serve presentation"]
    assert container["volumeMounts"][0]["mountPath"] == "presentation"


def test_deployment_selector_matches_template():
    spec = create_deployment("talk", "ns")["spec"]
    assert spec["selector"]["matchLabels"] == spec["template"]["metadata"]["labels"]
    assert spec["selector"]["matchLabels"]["app"] == "md-parser"


def test_deployment_volume_refers_to_config_map():
    volume = create_deployment("talk", "ns")["spec"]["template"]["spec"]["volumes"][0]
    assert volume["configMap"]["name"] == create_config_map("talk", "ns", "")["metadata"]["name"]


def test_service_ports_and_selector():
    service = create_service("talk", "ns")
    assert service["spec"]["ports"] == [{"name": "ui", "port": 80, "targetPort": 8000}]
    deployment = create_deployment("talk", "ns")
    assert service["spec"]["selector"] == deployment["spec"]["selector"]["matchLabels"]


def test_create_markdown_parser_returns_three():
    objects = create_markdown_parser("talk", "ns", "md")
    assert [obj["kind"] for obj in objects] == ["ConfigMap", "Deployment", "Service"]
    assert all(obj["metadata"]["namespace"] == "ns" for obj in objects)