# src/hppgen/cli.py
import sys
import argparse
import logging
from pathlib import Path

# Module imports
from hppgen import config
from hppgen.core.amalgamate import run
from hppgen.core.ignore import load_ignore_spec
from hppgen.core.includes import UnresolvedIncludeError
from hppgen.core.scanner import discover, read_source
from hppgen.models import FileSet

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Amalgamate a library's headers and sources into a single distributable header."
    )
    parser.add_argument("--includes", type=str, default=config.DEFAULT_INTERFACE_DIR,
                        help=f"Directory of interface ({config.INTERFACE_EXTENSION}) files (default: {config.DEFAULT_INTERFACE_DIR})")
    parser.add_argument("--sources", type=str, default=config.DEFAULT_IMPLEMENTATION_DIR,
                        help=f"Directory of implementation ({config.IMPLEMENTATION_EXTENSION}) files (default: {config.DEFAULT_IMPLEMENTATION_DIR})")
    parser.add_argument("-o", "--output", type=str, default=config.DEFAULT_OUTPUT,
                        help=f"Output header (default: {config.DEFAULT_OUTPUT})")
    parser.add_argument("--version-string", type=str, default=config.DEFAULT_VERSION,
                        help=f"Version embedded in the generated header (default: {config.DEFAULT_VERSION})")
    parser.add_argument("--version-macro", type=str, default=config.DEFAULT_VERSION_MACRO,
                        help=f"Name of the version macro (default: {config.DEFAULT_VERSION_MACRO})")
    parser.add_argument("--license-file", type=str, default=None,
                        help="File whose text replaces the built-in license block")
    parser.add_argument("-x", "--exclude", action="append", default=[],
                        help=f"gitignore-style pattern of files to leave out, matched against the file name and its path relative to the working directory (repeatable, added to {config.IGNORE_FILENAME})")
    parser.add_argument("--strict", action="store_true",
                        help="Fail when a quoted include does not name an amalgamated header")
    parser.add_argument("--dry-run", action="store_true", help="List the files that would be merged and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def print_summary(file_set: FileSet):
    print(f"{'Order':<5} | {'Group':<14} | {'Lines':<6} | {'File'}")
    print("-" * 60)
    rows = [("interface", f) for f in file_set.interface] + [("implementation", f) for f in file_set.implementation]
    for i, (group, f) in enumerate(rows):
        print(f"{i+1:<5} | {group:<14} | {f.line_count:<6} | {f.path.as_posix()}")
    print("-" * 60)
    print(f"Total files: {len(file_set)}")
    print("-" * 60)

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s: %(message)s",
        )

        interface_dir = Path(args.includes)
        implementation_dir = Path(args.sources)
        output_file = Path(args.output)

        for directory in (interface_dir, implementation_dir):
            if not directory.is_dir():
                print(f"Error: Invalid directory '{directory}'", file=sys.stderr)
                sys.exit(1)

        license_text = config.LEGAL_HEADER
        if args.license_file:
            license_text = read_source(Path(args.license_file))

        print(f"--- hppgen ---")
        print(f"Interface:      {interface_dir}/*{config.INTERFACE_EXTENSION}")
        print(f"Implementation: {implementation_dir}/*{config.IMPLEMENTATION_EXTENSION}")
        print(f"Output:         {output_file}")
        print(f"Version:        {args.version_macro} \"{args.version_string}\"")

        # 2. Exclusion rules
        ignore_spec = load_ignore_spec(Path(config.IGNORE_FILENAME), extra_patterns=args.exclude)

        # 3. Discovery only
        if args.dry_run:
            print()
            print_summary(discover(interface_dir, implementation_dir, ignore_spec))
            print("Dry run: nothing written.")
            return

        # 4. Amalgamation
        file_set = run(
            interface_dir,
            implementation_dir,
            output_file,
            args.version_string,
            license_text,
            version_macro=args.version_macro,
            ignore_spec=ignore_spec,
            strict=args.strict,
        )

        print()
        print_summary(file_set)
        print(f"\nSuccess! Single header written to: {output_file}")

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except UnresolvedIncludeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except UnicodeDecodeError as e:
        print(f"Error: Input is not valid UTF-8: {e}", file=sys.stderr)
        sys.exit(1)

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
