"""Command that renders an example presentation."""

from __future__ import annotations

import argparse
import json
import sys

from slidectl.api import PresentationSpec, Slide
from slidectl.manifests import create_markdown_parser
from slidectl.render import render_markdown


def example_presentation() -> PresentationSpec:
    """A small two-slide presentation."""
    return PresentationSpec(
        slides=[
            Slide(
                title="Kubernetes re-cap",
                bullets=["First bullet point", "Second bullet point"],
                images=["https://example.com/kube-control-loop.png"],
            ),
            Slide(
                title="Next page",
                bullets=["Another bullet point", "Final bullet point"],
            ),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="slidectl", description="Render the example presentation."
    )
    parser.add_argument(
        "--manifests",
        action="store_true",
        help="print the ConfigMap, Deployment and Service as JSON instead of markdown",
    )
    parser.add_argument("--name", default="presentation", help="name of the workload")
    parser.add_argument("--namespace", default="default", help="namespace of the workload")
    args = parser.parse_args(argv)

    markdown = render_markdown(example_presentation())
    if args.manifests:
        objects = create_markdown_parser(args.name, args.namespace, markdown)
        print(json.dumps(list(objects), indent=2))
    else:
        sys.stdout.write(markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())