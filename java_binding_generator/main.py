#!/usr/bin/env python3
"""
CLI entry point for the Java bindings generator
Generates JNI glue functions and Java stub classes from Rust impl blocks
"""

import argparse
import sys

from java_binding_generator.build import (
    BuildRecord,
    install_artifacts,
    read_record,
    run_cargo_build,
    write_record,
)
from java_binding_generator.config import BindingConfig, parse_config_file
from java_binding_generator.constants import BUILD_RECORD_FILE
from java_binding_generator.errors import BindingGeneratorError, UnsupportedReturnType
from java_binding_generator.generator import JavaBindingsGenerator, resolve_library_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java-bindgen",
        description="Generate JNI glue and Java stub classes from Rust sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate --source . --entity Primitive --library mylib -o generated
  %(prog)s generate -C bindings.xml
  %(prog)s record --source . --name mylib
  %(prog)s build
        """
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only print errors"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate JNI glue and Java classes")
    generate.add_argument(
        "-C", "--config",
        metavar="CONFIG_FILE",
        help="XML configuration file specifying bindings to generate"
    )
    generate.add_argument(
        "-s", "--source",
        metavar="DIRECTORY",
        help="Root directory of the Rust sources (default: .)"
    )
    generate.add_argument(
        "-e", "--entity",
        action="append",
        default=[],
        metavar="NAME",
        help="Type to bind, may be repeated (default: types deriving the export marker)"
    )
    generate.add_argument(
        "-l", "--library",
        metavar="NAME",
        help="Library name for System.loadLibrary (default: crate name from Cargo.toml)"
    )
    generate.add_argument(
        "-o", "--output",
        metavar="DIRECTORY",
        help="Output directory for generated files"
    )
    generate.add_argument("--prefix", help="Prefix of exported native symbols")
    generate.add_argument("--runtime", help="Crate path providing JNI types and converters")
    generate.add_argument("--package", help="Java package of the generated classes")
    generate.add_argument("--marker", help="Derive name marking exported types")
    generate.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated files instead of writing them"
    )

    record = subparsers.add_parser("record", help="Write the build location record")
    record.add_argument("-s", "--source", default=".", metavar="DIRECTORY", help="Project root")
    record.add_argument("-n", "--name", help="Library name (default: crate name from Cargo.toml)")
    record.add_argument("-o", "--output", default=None, metavar="DIRECTORY",
                        help="Generator output directory (default: generated)")
    record.add_argument("--bin-source", help="Directory holding the compiled library")
    record.add_argument("--bin-target", help="Directory the library is copied to")
    record.add_argument("--java-source", help="Directory holding generated Java sources")
    record.add_argument("--java-target", help="Directory Java sources are copied to")

    build = subparsers.add_parser("build", help="Build the crate and copy artifacts into place")
    build.add_argument(
        "-r", "--record",
        default=BUILD_RECORD_FILE,
        metavar="FILE",
        help=f"Build record to use (default: {BUILD_RECORD_FILE})"
    )
    build.add_argument(
        "--no-cargo",
        action="store_true",
        help="Skip `cargo build` and only copy artifacts"
    )
    return parser


def merge_config(args) -> BindingConfig:
    """Load the config file if given and apply command line overrides"""
    config = parse_config_file(args.config) if args.config else BindingConfig()
    if args.source:
        config.source = args.source
    if args.entity:
        config.entities = list(args.entity)
    if args.library:
        config.library = args.library
    if args.output:
        config.output = args.output
    if args.prefix:
        config.symbol_prefix = args.prefix
    if args.runtime:
        config.runtime_crate = args.runtime
    if args.package:
        config.package = args.package
    if args.marker:
        config.export_marker = args.marker
    return config


def run_generate(args) -> int:
    try:
        config = merge_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error reading config file: {e}", file=sys.stderr)
        return 1

    generator = JavaBindingsGenerator(
        symbol_prefix=config.symbol_prefix,
        runtime_crate=config.runtime_crate,
        quiet=args.quiet or args.stdout,
    )
    try:
        files = generator.generate(
            config.source,
            entities=config.entities,
            library_name=config.library,
            output=None if args.stdout else config.output,
            package=config.package,
            export_marker=config.export_marker,
        )
    except UnsupportedReturnType as e:
        print(f"Error: {e} (method {e.method}, type {e.raw_type})", file=sys.stderr)
        return 1
    except BindingGeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stdout:
        for name, content in files.items():
            print(f"// {name}")
            print(content)
    return 0


def run_record(args) -> int:
    name = args.name or resolve_library_name(args.source)
    kwargs = {}
    if args.output:
        kwargs["output"] = args.output
    record = BuildRecord.with_defaults(
        args.source,
        name,
        bin_source=args.bin_source,
        bin_target=args.bin_target,
        java_source=args.java_source,
        java_target=args.java_target,
        **kwargs,
    )
    try:
        path = write_record(record)
    except OSError as e:
        print(f"Error: Could not write build record: {e}", file=sys.stderr)
        return 1
    if not args.quiet:
        print(f"Build record written: {path}")
    return 0


def run_build(args) -> int:
    try:
        record = read_record(args.record)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if not args.no_cargo:
            run_cargo_build(record.root, quiet=args.quiet)
        install_artifacts(record, quiet=args.quiet)
    except BindingGeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print("Build complete!")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "generate": run_generate,
        "record": run_record,
        "build": run_build,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
