from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Form, Request, Response

from .bridge import Bridge, handle_inbound

# Empty TwiML: Twilio is satisfied and sends no automatic reply.
EMPTY_TWIML = """<?xml version="1.0" encoding="UTF-8"?>
<Response></Response>"""

router = APIRouter()


def get_bridge(request: Request) -> Bridge:
    return request.app.state.bridge


@router.post("/sms")
def sms_inbound(
    From_: str | None = Form(None, alias="From"),
    Body: str | None = Form(None, alias="Body"),
    bridge: Bridge = Depends(get_bridge),
) -> Response:
    """
    Twilio-style SMS webhook endpoint.

    Behaviour:
      - look up the sender, ask the chat backend, text the reply back
      - all of it synchronously, before answering Twilio
      - always answer 200 with empty TwiML; unknown senders and backend or
        Twilio failures only show up in the logs
    """
    handle_inbound(bridge, from_number=From_, body=Body)
    return Response(content=EMPTY_TWIML, media_type="application/xml")


def create_app(bridge: Bridge) -> FastAPI:
    """Build the webhook app around an already-loaded Bridge."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Shutdown: release the chat backend's connection pool
        bridge.relay.close()

    app = FastAPI(title="sms-bridge", version="0.1.0", lifespan=lifespan)
    app.state.bridge = bridge
    app.include_router(router)
    return app
