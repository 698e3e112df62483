"""Interactive CLI: fill a form from YAML config and watch each field's visual state."""

from __future__ import annotations

import argparse
import sys

import yaml

from input_validator.config.loader import load_config
from input_validator.domain.state import VisualDirective
from input_validator.infrastructure.host import InMemoryHostWidget
from input_validator.observability.logging import setup_logging
from input_validator.orchestration.form import FormController


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Input validator interactive demo")
    p.add_argument("--config", "-c", required=True, help="Path to form YAML config")
    p.add_argument("--field", "-f", action="append", help="Only fill these fields (repeatable)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log field transitions to stderr")
    return p.parse_args(argv)


def format_directive(directive: VisualDirective) -> str:
    status = {"success": "ok", "danger": "invalid", "neutral": "-"}[directive.category.value]
    line = f"[{status}] {directive.label_text} ({directive.border_color})"
    if directive.error_message:
        line += f": {directive.error_message}"
    helper = directive.helper
    if helper.limit is not None:
        line += f" {helper.count}/{helper.limit}"
    return line


def run_interactive(form: FormController, names: list[str]) -> bool:
    """Prompt for each field until it is valid. Returns False if the user quits."""
    for name in names:
        controller = form.field(name)
        while True:
            controller.focus()
            controller.on_focus()
            try:
                line = input(f"{controller.directive.label_text}: ")
            except EOFError:
                return False
            if line.strip().lower() in ("quit", "exit", "q"):
                print("Goodbye.")
                return False
            controller.on_change_text(line)
            controller.on_end_editing()
            controller.blur()
            directive = controller.on_blur()
            print(format_directive(directive))
            if controller.state.valid:
                break
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "WARNING")
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    form = FormController(config, host_factory=lambda name: InMemoryHostWidget())
    names = args.field or form.field_names
    try:
        for name in names:
            form.field(name)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1

    print(config.name)
    print()
    if not run_interactive(form, names):
        return 1
    print()
    for name, value in form.values().items():
        if name in names:
            print(f"{name}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
