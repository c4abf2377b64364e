from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .engine import parse, render
from .errors import StacheUserError
from .logging_setup import setup_logging
from .template.escaping import ESCAPERS
from .template.tokens import to_dict
from .types import RenderOptions
from .version import tool_version
from .views import load_partials_dir, load_view, parse_partial_arg, read_text


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stache",
        description="Logic-less template renderer",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared by render/parse
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("template", help="template file, or - for stdin")
        sp.add_argument(
            "--tags",
            metavar="'OPEN CLOSE'",
            help="tag delimiters separated by whitespace (default: '{{ }}')",
        )

    sp_render = sub.add_parser("render", help="render a template to text")
    add_common(sp_render)
    sp_render.add_argument(
        "--view",
        metavar="FILE|-",
        help="YAML or JSON view document (default: empty mapping)",
    )
    sp_render.add_argument(
        "--partials",
        metavar="DIR",
        type=Path,
        help="directory of *.mustache partials, named by file stem",
    )
    sp_render.add_argument(
        "--partial",
        action="append",
        metavar="NAME=FILE",
        help="single partial (can be given several times, overrides --partials)",
    )
    sp_render.add_argument(
        "--escape",
        choices=sorted(ESCAPERS),
        default="html",
        help="escaping applied to {{name}} substitutions",
    )
    sp_render.add_argument("-o", "--output", type=Path, help="write result to a file instead of stdout")

    sp_parse = sub.add_parser("parse", help="print the token tree as JSON")
    add_common(sp_parse)

    return p


def _collect_partials(ns: argparse.Namespace) -> Dict[str, str]:
    partials: Dict[str, str] = {}
    if ns.partials is not None:
        partials.update(load_partials_dir(ns.partials))
    for spec in ns.partial or []:
        name, text = parse_partial_arg(spec)
        partials[name] = text
    return partials


def _run_render(ns: argparse.Namespace) -> int:
    if ns.template == "-" and ns.view == "-":
        raise StacheUserError("Template and view cannot both be read from stdin")
    template = read_text(ns.template)
    view = load_view(ns.view) if ns.view else {}
    options = RenderOptions.from_mapping({"tags": ns.tags, "escape": ns.escape})
    text = render(template, view, _collect_partials(ns), options)
    if ns.output is not None:
        ns.output.parent.mkdir(parents=True, exist_ok=True)
        ns.output.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def _run_parse(ns: argparse.Namespace) -> int:
    template = read_text(ns.template)
    ast = parse(template, ns.tags)
    data = [to_dict(token) for token in ast]
    sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    setup_logging(ns.verbose)

    try:
        if ns.cmd == "render":
            return _run_render(ns)
        if ns.cmd == "parse":
            return _run_parse(ns)
    except StacheUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
