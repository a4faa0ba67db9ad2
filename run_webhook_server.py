#!/usr/bin/env python
"""
Run XRPL.Sale Webhook Server - Entry point script for receiving webhooks.

Location: run_webhook_server.py
Purpose: Serve the XRPL.Sale webhook endpoint and log every event
Relevant files: src/xrpl_sale/middleware.py, config.yml

Usage:
    python run_webhook_server.py
    python run_webhook_server.py --port 8080 --path /webhooks/xrplsale

config.yml:
    xrpl_sale:
      webhook_secret: whsec_...
    server:
      host: 0.0.0.0
      port: 8080
    logging:
      level: INFO
"""

import argparse
import logging
from pathlib import Path

import yaml
from aiohttp import web


def load_config():
    """Load configuration from config.yml"""
    config_path = Path(__file__).parent / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def main():
    config = load_config()
    server_config = config.get("server", {})
    logging_config = config.get("logging", {})

    parser = argparse.ArgumentParser(description="Run XRPL.Sale webhook server")
    parser.add_argument("--host", default=server_config.get("host", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=server_config.get("port", 8080))
    parser.add_argument("--path", default=server_config.get("path", "/webhooks/xrplsale"))
    parser.add_argument("--log_level", default=logging_config.get("level", "INFO"))
    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger("webhook_server")

    # Import after parsing args
    from xrpl_sale import ClientConfig, setup_webhooks

    if "xrpl_sale" in config:
        client_config = ClientConfig.from_dict(config["xrpl_sale"])
    else:
        client_config = ClientConfig.from_env()

    app = web.Application()
    dispatcher = setup_webhooks(app, client_config, path=args.path)

    @dispatcher.on("*")
    def log_event(event):
        logger.info(f"Received {event.type} (id={event.id}): {event.data}")

    print(f"🚀 Starting XRPL.Sale webhook server on {args.host}:{args.port}{args.path}")
    web.run_app(app, host=args.host, port=args.port, print=None)


if __name__ == "__main__":
    main()
