import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from gateway import GatewayClient
from relay import ENDPOINTS, handle
from settings import Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class CareerCoachHandler(BaseHTTPRequestHandler):

    server_version = "CareerCoach/1.0"

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)

    def _route(self) -> str:
        path = self.path.split("?", 1)[0]
        path = path.split("#", 1)[0]
        # "/api/x/" routes like "/api/x"
        return path.rstrip("/") or "/"

    def _endpoint(self):
        path = self._route()
        if not path.startswith(API_PREFIX):
            return None
        return ENDPOINTS.get(path[len(API_PREFIX):])

    def _json(self, data, code: int = 200):
        out = b"" if data is None else json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(code)
        for name, value in CORS_HEADERS.items():
            self.send_header(name, value)
        if data is not None:
            self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Cache-Control", "no-store")
        self.send_header("Content-Length", str(len(out)))
        self.end_headers()
        if out:
            self.wfile.write(out)

    def _body(self) -> bytes:
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length) if length > 0 else b""

    def _relay(self, method: str):
        endpoint = self._endpoint()
        if endpoint is None:
            self._json({"error": "Not found"}, 404)
            return
        try:
            body = self._body() if method == "POST" else b""
        except ValueError:
            self._json({"error": "Invalid Content-Length"}, 500)
            return
        reply = handle(
            endpoint,
            method,
            body,
            self.server.gateway,
            validate=self.server.settings.validate_output,
        )
        self._json(reply.body, reply.status)

    def do_OPTIONS(self):
        self._relay("OPTIONS")

    def do_POST(self):
        self._relay("POST")

    def do_GET(self):
        if self._route() == "/api/health":
            self._json({"ok": True, "endpoints": sorted(ENDPOINTS)})
            return
        self._json({"error": "Not found"}, 404)


class CareerCoachServer(ThreadingHTTPServer):

    daemon_threads = True

    def __init__(self, address, settings: Settings, gateway):
        super().__init__(address, CareerCoachHandler)
        self.settings = settings
        self.gateway = gateway


def create_server(settings: Settings, gateway=None, address=None) -> CareerCoachServer:
    if gateway is None:
        gateway = GatewayClient(settings)
    if address is None:
        address = (settings.host, settings.port)
    return CareerCoachServer(address, settings, gateway)


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.api_key:
        logger.warning("LOVABLE_API_KEY is not set; every AI request will fail")
    server = create_server(settings)
    logger.info("Career coach server running on http://%s:%s", settings.host, settings.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
