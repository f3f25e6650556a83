#!/usr/bin/env python3
"""
Sequential File Renamer

Features:
- Renames every file in a directory to <name><sep><number>[.ext]
- Zero-padded counter with a minimum width (-p); wider numbers are never truncated
- Files only by default; optional -i to rename directories too
- Entries are processed in sorted name order so relative order is preserved
- Original file extensions are kept; dotfiles like ".gitignore" get no extension
- Optional -v logging to a dated log file: renamed.mm.dd.yyyy.txt (with collision handling)

CLI usage examples:
  python seq_renamer.py photo                         # rename files in the current folder
  python seq_renamer.py -n photo -d "D:\\Pics" -p 3     # photo-001.jpg, photo-002.jpg, ...
  python seq_renamer.py -n img -s _ -i -c             # include dirs, no confirmation

Confirmation:
- Unless -c is given, the directory and name pattern are echoed and the script
  asks to confirm. Only "y" or "yes" (any case) proceeds; anything else exits
  without touching the files.

Exit codes:
  0 success (also when confirmation is declined or some renames failed)
  1 invalid input
  2 system error
"""

from __future__ import annotations

import argparse
import datetime as dt
import os
import sys
from typing import Callable, List, NamedTuple, Optional, Tuple


class RenamerError(Exception):
    exit_code = 1


class InvalidInput(RenamerError):
    """Bad or missing command-line arguments."""

    exit_code = 1


class InputError(RenamerError):
    """Reading the confirmation answer failed."""

    exit_code = 1


class SystemFailure(RenamerError):
    """OS-level failure unrelated to what the user typed."""

    exit_code = 2


class Config(NamedTuple):
    name: str
    directory: str
    separator: str = "-"
    pad: int = 1
    include_dirs: bool = False
    skip_confirm: bool = False
    verbose: bool = False


class RenameReport(NamedTuple):
    renamed: int
    skipped: int
    errors: List[Tuple[str, str]]

    @property
    def ok(self) -> bool:
        return not self.errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rename all files in a directory to a sequential, zero-padded naming scheme.",
        add_help=True,
    )
    parser.add_argument("filename", nargs="?", help="Base filename (same as -n)")
    parser.add_argument("-n", dest="name", metavar="filename", default="", help="The string to use as the base filename")
    parser.add_argument("-d", dest="directory", metavar="directory", default="", help="The directory in which to rename files (default: current directory)")
    parser.add_argument("-s", dest="separator", metavar="separator", default="-", help="The string to use as a separator (default: -)")
    parser.add_argument("-p", dest="pad", metavar="pad", type=int, default=1, help="The number of digits used to pad the file number (default: 1)")
    parser.add_argument(
        "-i",
        dest="include_dirs",
        action="store_true",
        help="Include directories in the rename operation",
    )
    parser.add_argument(
        "-c",
        dest="skip_confirm",
        action="store_true",
        help="Don't ask for confirmation to rename the files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging to a dated log file and console",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Turn parsed arguments into a validated Config with an absolute directory."""
    name = args.name or args.filename
    if not name:
        raise InvalidInput("a base filename string is required.")

    if not args.directory:
        try:
            directory = os.getcwd()
        except OSError:
            raise SystemFailure("could not get current directory path.")
    else:
        if not os.path.isdir(args.directory):
            raise InvalidInput(f"the supplied directory ('{args.directory}') is not a valid path.")
        directory = os.path.abspath(args.directory)

    return Config(
        name=name,
        directory=directory,
        separator=args.separator or "-",
        pad=max(args.pad, 1),
        include_dirs=bool(args.include_dirs),
        skip_confirm=bool(args.skip_confirm),
        verbose=bool(args.verbose),
    )


def name_pattern(config: Config) -> str:
    return f"{config.name}{config.separator}{'#' * config.pad}.ext"


def confirm_plan(config: Config, input_fn: Callable[[str], str] = input) -> bool:
    print("Are you certain you want to rename the files using the provided parameters?")
    print(f"  Directory    : {config.directory}")
    print(f"  Name         : {name_pattern(config)}")
    print(f"  Include dirs : {'Yes' if config.include_dirs else 'No'}")
    try:
        ans = input_fn("Confirm: ")
    except (EOFError, OSError, UnicodeDecodeError):
        raise InputError("failed to get user input.")
    return ans.strip().upper() in {"Y", "YES"}


def list_entries(directory: str) -> List[Tuple[str, bool]]:
    """Return sorted (name, is_dir) pairs for the immediate entries of directory."""
    entries: List[Tuple[str, bool]] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    # dangling symlinks and the like are treated as plain files
                    is_dir = False
                entries.append((entry.name, is_dir))
    except OSError:
        raise SystemFailure("failed to get file listing for the target directory.")
    entries.sort(key=lambda e: e[0])
    return entries


def zero_pad(counter: int, width: int) -> str:
    s = str(counter)
    if len(s) >= width:
        return s
    return "0" * (width - len(s)) + s


def file_extension(filename: str) -> str:
    # splitext ignores leading dots, so ".gitignore" has no extension
    _, ext = os.path.splitext(filename)
    if ext == filename:
        return ""
    return ext


def sequential_name(config: Config, counter: int, filename: str) -> str:
    return f"{config.name}{config.separator}{zero_pad(counter, config.pad)}{file_extension(filename)}"


def ensure_log_file(base_dir: str) -> Optional[str]:
    # Create dated log file name like renamed.mm.dd.yyyy.txt with collision handling
    date_str = dt.datetime.now().strftime("%m.%d.%Y")
    base_name = f"renamed.{date_str}.txt"
    root, ext = os.path.splitext(base_name)
    path = os.path.join(base_dir, base_name)
    i = 0
    while os.path.exists(path):
        i += 1
        path = os.path.join(base_dir, f"{root}({i}){ext}")
    try:
        with open(path, 'a', encoding='utf-8'):
            pass
    except OSError:
        return None
    return path


def write_log_line(log_path: Optional[str], line: str):
    if not log_path:
        return
    try:
        with open(log_path, 'a', encoding='utf-8') as f:
            f.write(line.rstrip("\n") + "\n")
    except OSError:
        pass


def rename_entries(
    config: Config,
    entries: List[Tuple[str, bool]],
    rename: Optional[Callable[[str, str], None]] = None,
    log_path: Optional[str] = None,
) -> RenameReport:
    """Rename eligible entries in the given order.

    Directories are skipped unless include_dirs is set; skipped entries do not
    consume a number. A failed rename is recorded and the loop carries on, the
    number it would have used is not reused.
    """
    rename = rename or os.rename
    counter = 1
    renamed = 0
    skipped = 0
    errors: List[Tuple[str, str]] = []
    for filename, is_dir in entries:
        if is_dir and not config.include_dirs:
            skipped += 1
            continue
        src = os.path.join(config.directory, filename)
        dst = os.path.join(config.directory, sequential_name(config, counter, filename))
        counter += 1
        try:
            rename(src, dst)
        except OSError as e:
            print(f"Error: error while renaming file '{filename}': {e}")
            write_log_line(log_path, f"ERROR: {src} -> {dst} :: {e}")
            errors.append((filename, str(e)))
            continue
        write_log_line(log_path, f"RENAMED: {src} -> {dst}")
        renamed += 1
    return RenameReport(renamed=renamed, skipped=skipped, errors=errors)


def print_summary(total: int, report: RenameReport):
    if report.ok:
        print("Finished renaming files successfully.")
    else:
        print("Finished processing files, with errors.")
    print(f"  Total found : {total}")
    print(f"  Renamed     : {report.renamed}")
    print(f"  Skipped     : {report.skipped}")
    print(f"  Errors      : {len(report.errors)}")


def run(argv: List[str], input_fn: Callable[[str], str] = input) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad flags; -h exits 0
        return InvalidInput.exit_code if e.code else 0
    try:
        config = resolve_config(args)
    except InvalidInput:
        parser.print_usage()
        raise

    if not config.skip_confirm and not confirm_plan(config, input_fn):
        print("Exiting without changing files.")
        return 0

    entries = list_entries(config.directory)

    log_path = ensure_log_file(os.getcwd()) if config.verbose else None
    if config.verbose:
        if log_path:
            print(f"Logging to: {log_path}")
        else:
            print("Warning: Could not create log file; continuing without file logging.")

    report = rename_entries(config, entries, log_path=log_path)
    print_summary(len(entries), report)
    if log_path:
        print(f"Detailed log written to: {log_path}")
    return 0


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return run(argv, input_fn)
    except RenamerError as e:
        print(f"Error: {e}")
        return e.exit_code


def cli():
    try:
        sys.exit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(130)


if __name__ == "__main__":
    cli()
