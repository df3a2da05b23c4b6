import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from geogebra_ir import (
    AngleUnit,
    ArchiveError,
    GeogebraError,
    Kernel,
    KernelDocument,
    WorkspaceConfig,
    build_demo,
    get_workspace_config,
    print_construction,
    read_document,
    render_kernel,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _demo(args: argparse.Namespace) -> int:
    config: WorkspaceConfig = get_workspace_config()
    if args.label_prefix:
        config.label_prefix = args.label_prefix
    config.pretty_print = args.pretty
    workspace = build_demo(config)
    logger.info(
        "Demo construction has %d item(s)", len(workspace.document.construction.items)
    )
    path = workspace.save(args.output)
    print(f"GeoGebra file written to {path}")
    return 0


def _inspect(args: argparse.Namespace) -> int:
    path = Path(args.path)
    logger.info("Reading container %s", path)
    try:
        fin = open(path, "rb")
    except OSError as exc:
        raise ArchiveError(f"cannot open {path}: {exc}") from exc
    with fin:
        document = read_document(fin)
    print(print_construction(document), end="")
    return 0


def _kernel(args: argparse.Namespace) -> int:
    document = KernelDocument(
        Kernel(
            digits=args.digits,
            angle_unit=AngleUnit(args.angle_unit),
            coord_style=args.coord_style,
        )
    )
    print(render_kernel(document))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build and inspect GeoGebra constructions")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    demo = commands.add_parser("demo", help="Write the incircle demo construction")
    demo.add_argument("output", help="Path of the .ggb file to write")
    demo.add_argument("--label-prefix", help="Prefix for generated labels")
    demo.add_argument(
        "--pretty",
        action="store_true",
        help="Indent geogebra.xml inside the container",
    )
    demo.set_defaults(handler=_demo)

    inspect = commands.add_parser("inspect", help="Print the construction of a .ggb file")
    inspect.add_argument("path", help="Path of the .ggb file to read")
    inspect.set_defaults(handler=_inspect)

    kernel = commands.add_parser("kernel", help="Print a kernel settings document")
    kernel.add_argument("--digits", type=int, default=1)
    kernel.add_argument(
        "--angle-unit",
        choices=[unit.value for unit in AngleUnit],
        default=AngleUnit.DEGREE.value,
    )
    kernel.add_argument("--coord-style", type=int, default=1)
    kernel.set_defaults(handler=_kernel)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        return args.handler(args)
    except GeogebraError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
