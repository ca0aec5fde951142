# routers/cloudinary.py
import hashlib, time, logging
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from config import APP_NAME, Credentials

router = APIRouter(tags=["cloudinary"])
log = logging.getLogger(APP_NAME)

DEFAULT_FOLDER = "posts"

class SignResp(BaseModel):
    api_key: str
    timestamp: int
    signature: str

def get_credentials(request: Request) -> Credentials:
    """Credenciales resueltas una sola vez al arrancar (ver main.create_app)."""
    return request.app.state.credentials

def build_params_to_sign(folder: str, timestamp: int) -> str:
    # orden fijo: folder, timestamp
    return f"folder={folder}&timestamp={timestamp}"

def sign_params(folder: str, timestamp: int, api_secret: str) -> str:
    to_sign = build_params_to_sign(folder, timestamp) + api_secret
    return hashlib.sha1(to_sign.encode("utf-8")).hexdigest()

@router.get("/sign", response_model=SignResp)
def sign(folder: str = DEFAULT_FOLDER, creds: Credentials = Depends(get_credentials)):
    folder = folder or DEFAULT_FOLDER
    ts = int(time.time())
    log.debug("sign folder=%s timestamp=%s", folder, ts)
    return {
        "api_key": creds.api_key,
        "timestamp": ts,
        "signature": sign_params(folder, ts, creds.api_secret),
    }
