"""
Webhook dispatching and aiohttp integration.

Inbound webhook requests are verified against the configured secret,
parsed into events and routed by event kind to registered handlers.

Example:
    from aiohttp import web
    from xrpl_sale import ClientConfig, setup_webhooks

    app = web.Application()
    dispatcher = setup_webhooks(app, ClientConfig.from_env())

    @dispatcher.on("investment.created")
    async def on_investment(event):
        logger.info(f"New investment: {event.data['amount_xrp']} XRP")
"""

import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from aiohttp import web

from .constants import DEFAULT_WEBHOOK_PATH, SIGNATURE_HEADER
from .models.config import ClientConfig
from .models.webhook import WebhookEvent
from .webhooks import (
    Payload,
    WebhookParseError,
    WebhookVerificationError,
    parse_event,
    verify_signature,
)

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebhookEvent], Union[Any, Awaitable[Any]]]

# Handlers registered under this kind receive every verified event
WILDCARD = "*"


class WebhookDispatcher:
    """Verifies inbound webhooks and routes them to handlers by event kind."""

    def __init__(self, secret: Optional[str]):
        self._secret = secret
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)

        if not secret:
            logger.warning(
                "Webhook secret is not configured; every webhook will be rejected"
            )

    def register(self, kind: str, handler: EventHandler) -> EventHandler:
        """Register a sync or async handler for an event kind."""
        self._handlers[kind].append(handler)
        return handler

    def on(self, kind: str) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of register()."""
        def decorator(handler: EventHandler) -> EventHandler:
            return self.register(kind, handler)
        return decorator

    def handlers_for(self, kind: str) -> List[EventHandler]:
        return list(self._handlers.get(kind, [])) + list(self._handlers.get(WILDCARD, []))

    async def dispatch(self, payload: Payload, signature: Optional[str]) -> bool:
        """
        Verify, parse and route a webhook payload.

        Returns:
            True if at least one handler received the event

        Raises:
            WebhookVerificationError: If the signature does not match;
                no handler is invoked
            WebhookParseError: If the payload is not a valid event
        """
        if not verify_signature(payload, signature, self._secret):
            logger.warning("Rejected webhook with invalid signature")
            raise WebhookVerificationError("Invalid webhook signature")

        event = parse_event(payload)
        handlers = self.handlers_for(event.type)
        if not handlers:
            logger.debug(f"No handler registered for webhook event {event.type}")
            return False

        for handler in handlers:
            result = handler(event)
            if inspect.isawaitable(result):
                await result

        logger.info(f"Handled webhook event {event.type} (id={event.id})")
        return True

    async def handle_request(self, request: web.Request) -> web.Response:
        """aiohttp request handler for the webhook endpoint."""
        body = await request.read()
        signature = request.headers.get(SIGNATURE_HEADER)

        try:
            handled = await self.dispatch(body, signature)
        except WebhookVerificationError:
            return web.json_response({"error": "Invalid signature"}, status=401)
        except WebhookParseError as e:
            logger.warning(f"Rejected malformed webhook payload: {e}")
            return web.json_response({"error": "Invalid payload"}, status=400)
        except Exception:
            logger.exception("Webhook handler failed")
            return web.json_response({"error": "Webhook handler failed"}, status=500)

        return web.json_response({"received": True, "handled": handled})


DISPATCHER_KEY = web.AppKey("xrpl_sale_dispatcher", WebhookDispatcher)


def webhook_middleware(
    dispatcher: WebhookDispatcher,
    path: str = DEFAULT_WEBHOOK_PATH,
):
    """Middleware answering POSTs on ``path`` before routing reaches the app."""

    @web.middleware
    async def middleware(request: web.Request, handler):
        if request.method == "POST" and request.path == path:
            return await dispatcher.handle_request(request)
        return await handler(request)

    return middleware


def setup_webhooks(
    app: web.Application,
    config: ClientConfig,
    path: Optional[str] = DEFAULT_WEBHOOK_PATH,
    dispatcher: Optional[WebhookDispatcher] = None,
) -> WebhookDispatcher:
    """
    One-time startup wiring for an aiohttp application.

    Builds a dispatcher from the explicit config, stores it on the app
    under DISPATCHER_KEY and mounts it at ``path`` (skipped when path is
    None, e.g. when webhook_middleware is installed instead).
    """
    dispatcher = dispatcher or WebhookDispatcher(config.webhook_secret)
    app[DISPATCHER_KEY] = dispatcher

    if path:
        app.router.add_post(path, dispatcher.handle_request)
        logger.info(f"XRPL.Sale webhooks mounted at {path}")

    return dispatcher
