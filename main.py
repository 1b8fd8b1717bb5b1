import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv

load_dotenv()

APPS = {
    "api": ("backend_fastapi.main:app", "8000"),
    "client": ("frontend_fastapi.main:app", "8001"),
}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def run(which: str = "api") -> None:
    if which not in APPS:
        raise SystemExit(f"App desconocida: {which!r} (opciones: {', '.join(APPS)})")
    app_path, default_port = APPS[which]

    host = os.getenv("HOST", "127.0.0.1")
    port_str = os.getenv("PORT", default_port)
    port = int(port_str)
    reload = _as_bool(os.getenv("RELOAD", "true"))
    log_level = os.getenv("LOG_LEVEL", "info")

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Starting {which} at http://{host}:{port} (Reload: {reload})")

    uvicorn.run(
        app_path,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else "api")
