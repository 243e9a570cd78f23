"""
Auth Service
Handles: registration, login, JWT creation, token verification
Port: 8001

Register and login always answer HTTP 200 with an AuthResult envelope;
the outcome is in ``success``. Only /verify uses status codes (401).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from auth_service.config import LOG_LEVEL, PORT
from auth_service.database import init_db
from auth_service.dependencies import get_auth_service, get_token_issuer
from auth_service.exceptions import InvalidTokenException, TokenError
from auth_service.models import (
    AuthResult,
    HealthResponse,
    TokenVerifyRequest,
    TokenVerifyResponse,
    UserLogin,
    UserRegister,
)
from auth_service.service import AuthService
from auth_service.tokens import TokenIssuer

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# ── App ───────────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("[auth-service] Started on port %s", PORT)
    yield

app = FastAPI(title="Auth Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.post("/api/auth/register", response_model=AuthResult, response_model_exclude_none=True)
def register(user: UserRegister, auth: AuthService = Depends(get_auth_service)):
    return auth.register(user)


@app.post("/api/auth/login", response_model=AuthResult, response_model_exclude_none=True)
def login(user: UserLogin, auth: AuthService = Depends(get_auth_service)):
    return auth.login(user.email, user.password)


@app.post("/api/auth/verify", response_model=TokenVerifyResponse)
async def verify_token(body: TokenVerifyRequest, issuer: TokenIssuer = Depends(get_token_issuer)):
    """
    Internal endpoint for other services to validate a session token.
    Returns the subject (email) the token was issued for.
    """
    try:
        claims = issuer.verify_token(body.token)
    except TokenError as e:
        raise InvalidTokenException(str(e))
    return {"valid": True, "subject": claims["sub"], "expires_at": claims["exp"]}


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "service": "auth"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("auth_service.main:app", host="0.0.0.0", port=PORT, reload=True)
