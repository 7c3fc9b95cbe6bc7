#!/usr/bin/env python3
"""
android-i18n - Android string resources <-> translation spreadsheet

Commands:
    import   - Generate values[-XX]/strings.xml files from an .xls sheet
    export   - Collect values[-XX]/strings.xml files into an .xls sheet

Example Workflow:
    1. android-i18n export --output i18n.xls --project-dir app
       → Returns: spreadsheet path for translators

    2. [Translators fill in one column per locale]

    3. android-i18n import --source i18n.xls --default-locale en --project-dir app
       → Returns: written strings.xml paths + per-locale stats

Results are printed as JSON on stdout; logs go to stderr.
"""

import argparse
import json
import logging
import sys

from .config import load_config
from .exporter import export_resources
from .importer import import_from, summarize
from .resources import ResourceWriter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def cmd_import(args) -> dict:
    """Import translations from a spreadsheet into resource files."""
    config = load_config(args.config).merged(
        source_file=args.source,
        default_locale=args.default_locale,
        project_dir=args.project_dir,
    )

    trees = import_from(config.source_file, config.default_locale)
    written = ResourceWriter(config.project_dir).write_all(trees)

    return {
        "status": "ok",
        "source": str(config.source_file),
        "default_locale": config.default_locale,
        "files": [str(path) for path in written],
        "locales": summarize(trees),
        "summary": f"Imported {len(trees)} locales into {len(written)} resource files.",
    }


def cmd_export(args) -> dict:
    """Export resource files into a spreadsheet."""
    config = load_config(args.config).merged(
        export_file=args.output,
        default_locale=args.default_locale,
        project_dir=args.project_dir,
    )
    if not config.export_file:
        return {
            "status": "error",
            "error_type": "MISSING_OUTPUT",
            "error": "No export file provided",
            "suggestion": "Use --output or set export_file in the configuration file",
        }

    path = export_resources(config.export_file, config.default_locale, config.project_dir)
    return {
        "status": "ok",
        "output": str(path),
        "default_locale": config.default_locale,
        "summary": f"Exported string resources to {path}.",
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="android-i18n",
        description="android-i18n - Android string resources <-> translation spreadsheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Spreadsheet layout (first sheet of a legacy .xls workbook):
  key           | en        | fr
  greeting      | Hi #!     | Salut # !
  apples:one    | 1 apple   | 1 pomme
  apples:other  | # apples  | # pommes

  - '#' marks an argument: one -> %s, several -> %1$s, %2$s, ...
  - 'name:quantity' keys become <plurals> items

Examples:
  android-i18n import --source i18n.xls --default-locale en --project-dir app
  android-i18n export --output i18n.xls --project-dir app
  android-i18n import --config android-i18n.yml
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # import command
    import_parser = subparsers.add_parser("import", help="Generate strings.xml files from a spreadsheet")
    import_parser.add_argument("--source", "-s", help="Source .xls file")
    import_parser.add_argument("--default-locale", "-l", help="Locale written to values/ (default: en)")
    import_parser.add_argument("--project-dir", "-p", help="Android project directory (default: .)")
    import_parser.add_argument("--config", "-c", help="YAML configuration file")

    # export command
    export_parser = subparsers.add_parser("export", help="Collect strings.xml files into a spreadsheet")
    export_parser.add_argument("--output", "-o", help="Destination .xls file")
    export_parser.add_argument("--default-locale", "-l", help="Locale read from values/ (default: en)")
    export_parser.add_argument("--project-dir", "-p", help="Android project directory (default: .)")
    export_parser.add_argument("--config", "-c", help="YAML configuration file")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        if args.command == "import":
            result = cmd_import(args)
        else:
            result = cmd_export(args)
    except Exception as e:
        logger.debug("Command '%s' failed", args.command, exc_info=True)
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2))
    if result.get("status") != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
