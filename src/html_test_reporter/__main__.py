"""
CLI entry point. Parses args, loads the result file and delegates to the pipeline.
"""

import sys
from typing import Optional

from .cli import parse_args
from .config import get_output_filepath, load_config
from .errors import InputError
from .pipeline import create_report, load_results

_OVERRIDABLE = (
    "output_path",
    "page_title",
    "style_override_path",
    "enable_test_report_category",
    "include_failure_msg",
)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)

    config = load_config(args.project_dir)
    overrides = {}
    for name in _OVERRIDABLE:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = str(value) if name == "output_path" else value
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        results = load_results(args.results)
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Report failures are logged by create_report and do not change the exit status.
    create_report(results, get_output_filepath(config, cwd=args.project_dir), config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
