import argparse
import logging
import sys
from pathlib import Path

from calcverse.catalog import CalculatorStore, load_store
from calcverse.components.build import check_tree, render_tree, write_tree
from calcverse.core.services.identifiers import component_identifier, page_identifier
from calcverse.core.services.page_meta import calculator_path
from calcverse.domain.errors import BuildError
from calcverse.site import SiteConfig, load_site_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

STORE_PATH = "data/calculators.yaml"
SITE_CONFIG_PATH = "site.yaml"


def get_site_config(path: Path) -> SiteConfig:
    if not path.exists():
        logger.info("Site config %s not found, using defaults.", path)
        return SiteConfig()
    return load_site_config(path)


def get_store(path: Path) -> CalculatorStore:
    if not path.exists():
        logger.error("Calculator store %s not found.", path)
        sys.exit(1)
    return load_store(path)


def output_dir(args: argparse.Namespace, site: SiteConfig) -> Path:
    return Path(args.out) if args.out else Path(site.generation.output_dir)


def handle_validate(store: CalculatorStore, site: SiteConfig, args: argparse.Namespace) -> int:
    print(f"Store OK: {len(store)} calculators in {len(store.categories)} categories.")
    print(f"Digest: {store.digest}")
    return 0


def handle_generate(store: CalculatorStore, site: SiteConfig, args: argparse.Namespace) -> int:
    files = render_tree(store, site)
    out = output_dir(args, site)
    write_tree(out, files)
    print(f"Generated {len(store)} calculators ({len(files)} files) into {out}")
    return 0


def handle_check(store: CalculatorStore, site: SiteConfig, args: argparse.Namespace) -> int:
    out = output_dir(args, site)
    problems = check_tree(out, render_tree(store, site))
    if problems:
        for problem in problems:
            print(problem)
        logger.error("Generated package %s is out of date. Run `calcverse generate`.", out)
        return 1
    print(f"Generated package {out} is up to date.")
    return 0


def handle_routes(store: CalculatorStore, site: SiteConfig, args: argparse.Namespace) -> int:
    for calc in store:
        print(
            f"{calculator_path(calc.slug)}\t"
            f"{page_identifier(calc.slug)}\t{component_identifier(calc.slug)}"
        )
    return 0


HANDLERS = {
    "validate": handle_validate,
    "generate": handle_generate,
    "check": handle_check,
    "routes": handle_routes,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calcverse", description="CalcVerse CLI")
    parser.add_argument("--store", default=STORE_PATH, help="Calculator store YAML")
    parser.add_argument("--site-config", default=SITE_CONFIG_PATH, help="Site config YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # validate
    subparsers.add_parser("validate", help="Load and validate the calculator store")

    # generate
    generate_parser = subparsers.add_parser("generate", help="Generate the calculator package")
    generate_parser.add_argument("--out", help="Output directory (default: generation.output_dir)")

    # check
    check_parser = subparsers.add_parser(
        "check", help="Exit 1 if the generated package is out of date"
    )
    check_parser.add_argument("--out", help="Output directory (default: generation.output_dir)")

    # routes
    subparsers.add_parser("routes", help="List calculator routes and their identifiers")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        site = get_site_config(Path(args.site_config))
        store = get_store(Path(args.store))
        return HANDLERS[args.command](store, site, args)
    except BuildError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except ValueError as e:
        logger.error("Site config error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
