"""
Main entry point for rainwater harvesting design system.

Runs a single calculation from a JSON request file or starts the HTTP server.
"""

import json
import sys
from typing import Any, Dict, Optional

from .core import Config, setup_logger, HarvestingError
from .api import StaticRainfallProvider
from .services import DesignService


class RainwaterHarvestingApp:
    """Main application for rainwater harvesting design."""

    def __init__(self, config_file: Optional[str] = None, rainfall_mm: Optional[float] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            rainfall_mm: Fixed rainfall figure replacing the archive lookup
        """
        self.config = Config(config_file)

        self.logger = setup_logger(log_file=self.config.log_file, log_level=self.config.log_level)
        self.logger.info("=" * 60)
        self.logger.info("Rainwater Harvesting Design System")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        provider = StaticRainfallProvider(rainfall_mm) if rainfall_mm is not None else None
        self.service = DesignService.from_config(
            self.config,
            rainfall_provider=provider,
            logger=self.logger
        )

    def calculate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Run one calculation and return the response body."""
        return self.service.run(payload).to_dict()

    def serve(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        from .server import run_server

        run_server(
            self.service,
            host=host or self.config.server_host,
            port=port or self.config.server_port,
            log_level=self.config.log_level,
            logger=self.logger
        )


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Rainwater Harvesting Feasibility & Design"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    calc_parser = subparsers.add_parser("calc", help="Run one calculation from a JSON file")
    calc_parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to the request JSON file ('-' for stdin)"
    )
    calc_parser.add_argument(
        "--rainfall",
        type=float,
        default=None,
        help="Average annual rainfall in mm; skips the archive lookup"
    )

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    args = parser.parse_args(argv)

    try:
        if args.command == "calc":
            if args.input == "-":
                payload = json.load(sys.stdin)
            else:
                with open(args.input, "r", encoding="utf-8") as f:
                    payload = json.load(f)

            app = RainwaterHarvestingApp(config_file=args.config, rainfall_mm=args.rainfall)
            print(json.dumps(app.calculate(payload), indent=2))
        else:
            app = RainwaterHarvestingApp(config_file=args.config)
            app.serve(host=args.host, port=args.port)
    except (HarvestingError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Calculation failed: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Application failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
