# main.py — Cloudinary Sign Server
# Firma subidas directas a Cloudinary desde el frontend:
# - GET /sign?folder=... -> {api_key, timestamp, signature}
# - GET /health
# Uso: definir CLOUDINARY_URL o CLOUDINARY_API_KEY + CLOUDINARY_API_SECRET
#      python main.py

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import APP_NAME, CORS_ORIGINS, HOST, LOG_LEVEL, PORT, Credentials, resolve_credentials
from routers.cloudinary import router as cloudinary_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(message)s")
log = logging.getLogger(APP_NAME)

# =============================================================================
# APP + CORS
# =============================================================================
def create_app(credentials: Optional[Credentials] = None) -> FastAPI:
    app = FastAPI(title=APP_NAME)
    # solo lectura despues del arranque
    app.state.credentials = credentials if credentials is not None else resolve_credentials()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=3600,
    )

    @app.get("/health", response_class=PlainTextResponse)
    def health(): return "ok"

    app.include_router(cloudinary_router)
    return app

app = create_app()

if __name__ == "__main__":
    log.info(f"Cloudinary sign server listening on http://localhost:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
