from fastapi import APIRouter

from mpags_cipher.api.v1.endpoints import ciphers, decrypt, encrypt

api_router = APIRouter()

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)
