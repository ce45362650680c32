"""Demo driver — runs the sample message sequence against a fresh runtime.

Usage
-----
    ao-process-demo
    python -m ao_process.demo --verbose
"""

from __future__ import annotations

import argparse
import json

from ao_process.config import get_settings
from ao_process.services.process_runtime import ProcessRuntime

DEMO_SENDER = "test-sender"


def _message(action: str, key: str | None = None, data: str | None = None) -> dict:
    tags = {"Action": action}
    if key is not None:
        tags["Key"] = key
    msg: dict = {"From": DEMO_SENDER, "Tags": tags}
    if data is not None:
        msg["Data"] = data
    return msg


def build_demo_messages() -> list[tuple[str, dict]]:
    """(title, message) pairs in the order the demo sends them."""
    return [
        ("Info action", _message("Info")),
        ("Set action", _message("Set", key="test-key", data="test-value")),
        ("Get action", _message("Get", key="test-key")),
        ("List action", _message("List")),
        ("Unknown action", _message("UnknownAction")),
        ("Remove action", _message("Remove", key="age")),
        ("Clear action", _message("Clear")),
    ]


def run_demo(runtime: ProcessRuntime, out=print) -> list[dict]:
    """Send every demo message through runtime.handle; return decoded responses."""
    responses: list[dict] = []
    for idx, (title, message) in enumerate(build_demo_messages(), start=1):
        if title == "Remove action":
            # Seed a few entries directly so Remove has something to remove
            for key, value in (("name", "Alice"), ("age", "30"), ("city", "New York")):
                runtime.store.set(key, value)
            out(f"\nState size before remove: {runtime.store.size()}")
            out(f"Current state: {json.dumps(json.loads(runtime.get_state()), indent=2)}")

        out(f"\n{idx}. Testing {title}:")
        response = json.loads(runtime.handle(json.dumps(message)))
        out(f"Response: {json.dumps(response, indent=2)}")
        responses.append(response)
    return responses


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send the sample AO message sequence to an in-memory process.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def build_runtime(verbose: bool = False) -> ProcessRuntime:
    """Runtime for the demo: console-friendly logs, DEBUG when verbose."""
    settings = get_settings().model_copy(update={
        "log_level": "DEBUG" if verbose else "WARNING",
        "log_format": "text",
    })
    return ProcessRuntime(settings=settings)


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)

    runtime = build_runtime(args.verbose)
    runtime.init_process()
    print(f"{runtime.settings.process_name} - Testing Mode")
    print("=" * 40)
    run_demo(runtime)
    print("\nAll demo messages handled.")


if __name__ == "__main__":
    main()
