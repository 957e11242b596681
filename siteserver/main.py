import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Header, Request, Response, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import pages
from .auth import require_basic_auth
from .storage import counter

logger = logging.getLogger(__name__)

app = FastAPI(title="Browser Test Site", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)

SLOW_DELAY = 0.2
PING_DELAY = 0.05
PING_JS_DELAY = 0.2

TEST_COOKIE = 'hello-world-go="this is a test cookie, yum!"; Max-Age=3600'
CSP_POLICY = "default-src https:"

METHODS = ["GET", "HEAD"]


@app.exception_handler(StarletteHTTPException)
async def plain_text_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# === Pages ===


@app.api_route("/", methods=METHODS, response_class=HTMLResponse)
def index(
    response: Response,
    x_authenticated_user: Optional[list[str]] = Header(default=None),
):
    if x_authenticated_user:
        logger.info("x-authenticated-user header present in call to index: %s", x_authenticated_user)
        response.headers["x-authenticated-user"] = x_authenticated_user[0]
    return pages.INDEX_HTML


@app.api_route("/other", methods=METHODS, response_class=HTMLResponse)
def other(response: Response):
    # Raw header: the value's spaces and comma would be escaped by SimpleCookie.
    response.headers.append("set-cookie", TEST_COOKIE)
    return pages.OTHER_HTML


@app.api_route("/embed-youtube", methods=METHODS, response_class=HTMLResponse)
def embed_youtube():
    return pages.EMBED_YOUTUBE_HTML


@app.api_route("/ping-main-html", methods=METHODS, response_class=HTMLResponse)
def ping_main_html():
    return pages.PING_MAIN_HTML


@app.api_route("/ping-html", methods=METHODS, response_class=HTMLResponse)
def ping_html():
    return pages.PING_HTML


@app.api_route("/textbox", methods=METHODS, response_class=HTMLResponse)
def textbox():
    return pages.TEXTBOX_HTML


@app.api_route("/dialogbox", methods=METHODS, response_class=HTMLResponse)
def dialogbox():
    return pages.DIALOGBOX_HTML


@app.api_route("/robots.txt", methods=METHODS, response_class=PlainTextResponse)
def robots_txt():
    return pages.ROBOTS_TXT


# === Behaviors ===


@app.api_route("/csp", methods=METHODS, response_class=PlainTextResponse)
def csp(response: Response):
    response.headers["Content-Security-Policy"] = CSP_POLICY
    return "Hello, CSP tester"


@app.api_route("/protected", methods=METHODS, response_class=PlainTextResponse)
def protected(user: str = Depends(require_basic_auth)):
    return "Hello, admin"


@app.api_route("/slow", methods=METHODS, response_class=PlainTextResponse)
def slow():
    time.sleep(SLOW_DELAY)
    return "Sorry, that was slow"


@app.api_route("/ping", methods=METHODS, response_class=PlainTextResponse)
def ping():
    time.sleep(PING_DELAY)
    return f"pong {counter.increment()}"


@app.api_route("/ping.js", methods=METHODS)
def ping_js():
    time.sleep(PING_JS_DELAY)
    return Response(content=pages.PING_JS, media_type="application/javascript")


# === WebSocket ===


@app.websocket("/ws/echo")
async def ws_echo(websocket: WebSocket):
    """Echo every frame back to the sender with its original type."""
    await websocket.accept()
    peer = f"{websocket.client.host}:{websocket.client.port}" if websocket.client else "-"
    logger.info("connection made with: %s", peer)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.info("ws connection closed by %s (code %s)", peer, message.get("code"))
                return
            text = message.get("text")
            if text is not None:
                logger.info("%s sent: %s", peer, text)
                await websocket.send_text(text)
            else:
                data = message.get("bytes") or b""
                logger.info("%s sent: %r", peer, data)
                await websocket.send_bytes(data)
    except WebSocketDisconnect as exc:
        logger.info("ws echo to %s ended: disconnected (code %s)", peer, exc.code)
    except RuntimeError as exc:
        logger.warning("ws echo to %s failed: %s", peer, exc)
