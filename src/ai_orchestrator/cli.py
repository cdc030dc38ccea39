"""
Command-line entry point for the AI Orchestrator MCP server.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from pydantic import ValidationError

from ai_orchestrator import __version__
from ai_orchestrator.app import OrchestratorApp
from ai_orchestrator.utils.secrets import generate_env_template


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-orchestrator",
        description="MCP server that asks Gemini, GPT-4 and Grok for code reviews.",
    )
    parser.add_argument(
        "--config",
        help="Path to the YAML configuration file (default: ./ai_orchestrator.config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--env-template",
        metavar="PATH",
        nargs="?",
        const=".env.example",
        help="Write a .env template (default: .env.example) and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and serve over stdio until the channel closes."""
    args = build_parser().parse_args(argv)

    if args.env_template:
        generate_env_template(args.env_template)
        print(f"Created template file at {args.env_template}", file=sys.stderr)
        return 0

    app = OrchestratorApp(config_path=args.config, log_level=args.log_level)
    try:
        asyncio.run(app.serve())
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
