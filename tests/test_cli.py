import json

import pytest

from slidectl.cli import example_presentation, main
from slidectl.render import render_markdown


def test_example_titles():
    titles = [slide.title for slide in example_presentation().slides]
    assert titles == ["Kubernetes re-cap", "Next page"]


def test_main_prints_markdown(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == render_markdown(example_presentation())
    assert "### Kubernetes re-cap" in out


def test_main_prints_manifests(capsys):
    assert main(["--manifests", "--name", "talk", "--namespace", "ns"]) == 0
    objects = json.loads(capsys.readouterr().out)
    assert [obj["kind"] for obj in objects] == ["ConfigMap", "Deployment", "Service"]
    assert objects[1]["metadata"] == {"name": "talk", "namespace": "ns"}
    assert objects[0]["data"]["presentation.md"] == render_markdown(example_presentation())


def test_unknown_option_exits():
    with pytest.raises(SystemExit):
        main(["--bogus"])