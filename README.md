# slidectl

`slidectl` turns a *Presentation* resource — a list of slides, each with a
title, bullet points and images — into a Markdown slide deck, and builds the
resources needed to serve that deck inside a cluster: a ConfigMap holding the
Markdown, a Deployment running the slide server, and a Service exposing it.
A reconciler ties these together against any client object you supply.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
slidectl-render
```

Renders a built-in two-slide example presentation and writes the Markdown to
standard output.

```
slidectl-render --manifests --name demo --namespace slides
```

With `--manifests`, prints the ConfigMap, Deployment and Service for the
rendered example as a JSON list instead. `--name` (default `presentation`)
names the Deployment and Service; `--namespace` (default `default`) sets the
namespace of all three.

## Library use

### Describing a presentation

`slidectl.api` holds the resource types. `Slide`, `PresentationSpec`,
`ObjectMeta`, `Presentation` and `PresentationList` are dataclasses that
convert to and from plain dictionaries in the resource's JSON shape with
`to_dict()` and `from_dict()`:

```python
from slidectl.api import Presentation, PresentationSpec, Slide

spec = PresentationSpec(slides=[
    Slide(title="Intro", bullets=["First point", "Second point"]),
    Slide(title="Next", images=["diagram.png"]),
])
```

Empty slide fields are left out of `Slide.to_dict()`. `from_dict()` raises
`TypeError` when a field has the wrong type, and `Presentation.from_dict()` /
`PresentationList.from_dict()` raise `ValueError` when `kind` names another
resource. `PresentationStatus` carries no fields.

`GroupVersion.api_version()` gives the `apiVersion` string; the resources use
`presentations.haavard.dev/v1alpha1`.

### Rendering Markdown

```python
from slidectl.render import render_markdown

markdown = render_markdown(spec)
```

Each slide becomes a `###` heading followed by its bullets (`- ...`) and
images (`![](...)`), and each slide ends with `---`. Titles, bullets and
image paths are HTML-escaped: `<`, `>`, `&`, `'`, `"` and `+` become
character references.

### Building the serving resources

`slidectl.manifests` builds the resources as dictionaries:

```python
from slidectl.manifests import create_markdown_parser

config_map, deployment, service = create_markdown_parser("demo", "default", markdown)
```

`create_config_map`, `create_deployment` and `create_service` build each one
on its own. The ConfigMap is always named `presentation-config` and holds the
Markdown under the key `presentation.md`. The Deployment runs one
`python:3.13-alpine` container that installs and starts `mkslides serve` over
the mounted ConfigMap. The Deployment and Service take the given name and
select pods labelled `app: md-parser`; the Service maps port 80 to port 8000.

### Reconciling

`slidectl.controller.PresentationReconciler` brings a cluster in line with a
Presentation through a client you pass in. The client needs three methods:

- `get(kind, namespace, name)` returning the object as a dictionary (for a
  Presentation, a dictionary or a `Presentation`), raising `NotFoundError`
  when it does not exist;
- `create(obj)`;
- `update(obj)`.

`reconcile(request)` takes a `Request(name, namespace)`, does nothing for a
Presentation that is missing or has a deletion timestamp, otherwise renders
the Markdown and calls `setup_presentation`. That builds the ConfigMap,
Deployment and Service, marks the Presentation as their controlling owner with
`set_controller_reference`, and creates each one that does not exist or
updates the existing one (the ConfigMap's `data`, the others' `spec`). It
returns a `Result`; errors from the client propagate.

`set_controller_reference(owner, obj)` raises `ValueError` when the owner and
the object are in different namespaces, or when the object already has a
different controlling owner.

## What it does not do

`slidectl` does not talk to a cluster itself. There is no Kubernetes client,
no watch loop or controller manager that calls `reconcile` when resources
change, no leader election, and no metrics or health endpoints. To run it
against a cluster, supply a client with the methods above and call
`reconcile` yourself.