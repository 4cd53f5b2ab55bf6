"""CLI entry point for the patch gate."""
import argparse
from dotenv import load_dotenv
import json
import logging
import os
import sys
import traceback
from pathlib import Path

from patch_gate.validation.exceptions import PatchGateError, PolicyConfigError

load_dotenv()

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_PATCH_REJECTED = 2
EXIT_GENERATION_ERROR = 3
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

# Directories never loaded as project files
_SKIPPED_DIRS = frozenset({"node_modules", ".git", ".next", "dist", "build"})

# Safe keys allowed in config output (no secrets)
_SAFE_CONFIG_KEYS = frozenset({
    "prompt", "project_dir", "provider", "model", "file_count", "output_json",
})


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="patch-gate",
        description="Validate and review AI-generated game project patches",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a patch JSON file")
    validate.add_argument("patch_file", type=str, help='Path to a JSON file shaped {"files": [...]}')
    validate.add_argument(
        "--scan", action="store_true", help="Also report unsafe-code warnings"
    )
    validate.add_argument("--output-json", action="store_true", help="Output results as JSON")
    validate.add_argument(
        "--max-files",
        type=int,
        default=None,
        help="Override the maximum number of operations per patch",
    )
    validate.add_argument(
        "--max-file-size",
        type=int,
        default=None,
        help="Override the maximum content size per file",
    )

    scan = subparsers.add_parser("scan", help="Report unsafe-code warnings for files")
    scan.add_argument("files", nargs="+", help="Files to scan")
    scan.add_argument("--output-json", action="store_true", help="Output results as JSON")

    normalize = subparsers.add_parser("normalize", help="Normalize paths for display")
    normalize.add_argument("paths", nargs="+", help="Paths to normalize")

    generate = subparsers.add_parser("generate", help="Generate a patch from a prompt")
    generate.add_argument("prompt", type=str, help="Change request for the game project")
    generate.add_argument(
        "--project-dir",
        type=str,
        default=".",
        help="Project root whose files are shown to the model (default: .)",
    )
    generate.add_argument(
        "--provider",
        type=str,
        default="auto",
        choices=("auto", "anthropic", "openai"),
        help="LLM provider: auto (default), anthropic, or openai",
    )
    generate.add_argument("--model", type=str, default=None, help="Model ID to use")
    generate.add_argument("--output-json", action="store_true", help="Output results as JSON")
    generate.add_argument(
        "--dry-run", action="store_true", help="Print config and exit without running"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_patch_file(raw_path: str) -> object:
    """Read and decode a patch JSON file.

    Raises:
        SystemExit: If the file is missing or not valid JSON.
    """
    path = Path(raw_path)
    if not path.is_file():
        print(f"Error: '{raw_path}' is not a file.", file=sys.stderr)
        raise SystemExit(EXIT_INVALID_INPUT)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Error: '{raw_path}' is not valid JSON: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_INVALID_INPUT)


def load_project_files(project_dir: str) -> dict[str, str]:
    """Collect text files under project_dir whose paths pass validation.

    Raises:
        SystemExit: If project_dir is not a directory.
    """
    from patch_gate.validation import validate_file_path

    root = Path(project_dir).resolve()
    if not root.is_dir():
        print(f"Error: '{project_dir}' is not a valid directory.", file=sys.stderr)
        raise SystemExit(EXIT_INVALID_INPUT)

    files: dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIPPED_DIRS)
        for filename in sorted(filenames):
            full_path = Path(dirpath) / filename
            relative = full_path.relative_to(root).as_posix()
            if validate_file_path(relative) is not None:
                continue
            try:
                files[relative] = full_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
    return files


def format_result_json(result: dict) -> str:
    return json.dumps(result, indent=2, default=str)


def print_config_human(config: dict) -> None:
    """Print configuration in human-readable format.

    Only prints keys in the safe allowlist to prevent secret leakage.
    """
    print("\nConfiguration:")
    print(f"{'='*40}")
    for key, value in config.items():
        if key in _SAFE_CONFIG_KEYS:
            print(f"  {key}: {value}")
    print(f"{'='*40}")


def run_validate(args: argparse.Namespace) -> int:
    from patch_gate.validation import PatchPolicy, PatchValidator, UnsafeCodeScanner

    raw_patch = load_patch_file(args.patch_file)
    policy = PatchPolicy.from_env(
        max_files_per_patch=args.max_files,
        max_file_size=args.max_file_size,
    )
    result = PatchValidator(policy).validate(raw_patch)

    warnings = []
    if args.scan and result.valid and isinstance(raw_patch, dict):
        warnings = UnsafeCodeScanner().scan_patch(raw_patch)

    if args.output_json:
        payload = result.model_dump()
        if args.scan:
            payload["warnings"] = [w.model_dump() for w in warnings]
        print(format_result_json(payload))
    else:
        if result.valid:
            print("Patch is valid.")
        else:
            print(f"Patch rejected ({len(result.errors)} error(s)):")
            for error in result.errors:
                label = error.path or "<patch>"
                print(f"  - {label}: {error.error}")
        if warnings:
            print(f"\nWarnings ({len(warnings)}):")
            for warning in warnings:
                print(f"  - {warning.path}: {warning.message}")

    return EXIT_SUCCESS if result.valid else EXIT_PATCH_REJECTED


def run_scan(args: argparse.Namespace) -> int:
    from patch_gate.validation import detect_unsafe_code

    report: dict[str, list[str]] = {}
    for raw_path in args.files:
        path = Path(raw_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read '{raw_path}': {exc}", file=sys.stderr)
            return EXIT_INVALID_INPUT
        report[raw_path] = detect_unsafe_code(content)

    if args.output_json:
        print(format_result_json(report))
    else:
        for raw_path, messages in report.items():
            if not messages:
                print(f"{raw_path}: no warnings")
                continue
            print(f"{raw_path}:")
            for message in messages:
                print(f"  - {message}")
    return EXIT_SUCCESS


def run_normalize(args: argparse.Namespace) -> int:
    from patch_gate.validation import normalize_path

    for raw_path in args.paths:
        print(normalize_path(raw_path))
    return EXIT_SUCCESS


def run_generate(args: argparse.Namespace) -> int:
    files = load_project_files(args.project_dir)
    config = {
        "prompt": args.prompt,
        "project_dir": str(Path(args.project_dir).resolve()),
        "provider": args.provider,
        "model": args.model,
        "file_count": len(files),
        "output_json": args.output_json,
    }
    if args.dry_run:
        if args.output_json:
            print(format_result_json(config))
        else:
            print_config_human(config)
        return EXIT_SUCCESS

    # Lazy import: avoid loading anthropic/openai for the other commands
    from patch_gate.generation import PatchGenerator
    from patch_gate.validation import PatchPolicy, PatchValidator

    generator_kwargs = {
        "llm_provider": args.provider,
        "validator": PatchValidator(PatchPolicy.from_env()),
    }
    if args.model:
        generator_kwargs["model"] = args.model
    generator = PatchGenerator(**generator_kwargs)
    result = generator.generate(args.prompt, files)

    if args.output_json:
        print(format_result_json(result.model_dump(mode="json")))
    else:
        print_generation_human(result)

    return EXIT_PATCH_REJECTED if result.error else EXIT_SUCCESS


def print_generation_human(result) -> None:
    """Print a GenerationResult in human-readable format."""
    print(f"\n{'='*60}")
    print("Generated Patch" + (" (demo mode)" if result.demo else ""))
    print(f"{'='*60}")
    print(f"\n{result.explanation}")

    if result.error:
        print(f"\nError: {result.error}")
        for error in result.validation_errors:
            print(f"  - {error.path or '<patch>'}: {error.error}")

    if result.patch.files:
        print(f"\nFile changes ({len(result.patch.files)}):")
        for op in result.patch.files:
            print(f"  {op.action.value}: {op.path}")

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  - {warning.path}: {warning.message}")

    print(f"\n{'='*60}")


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


_COMMANDS = {
    "validate": run_validate,
    "scan": run_scan,
    "normalize": run_normalize,
    "generate": run_generate,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return _COMMANDS[args.command](args)

    except SystemExit as exc:
        return exc.code

    except PolicyConfigError as exc:
        return _handle_error("Configuration error", exc, args.verbose, EXIT_INVALID_INPUT)

    except PatchGateError as exc:
        return _handle_error("Patch gate error", exc, args.verbose, EXIT_GENERATION_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)
