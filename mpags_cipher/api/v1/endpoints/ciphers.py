from fastapi import APIRouter

from mpags_cipher.models.schemas import CipherInfo, CipherListResponse
from mpags_cipher.services.engines.registry import CipherRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List the cipher types that can be used for encryption and decryption.",
)
async def list_ciphers() -> CipherListResponse:
    """Describe every registered cipher."""
    ciphers = []
    for cipher_type in CipherRegistry.list_registered():
        cipher_class = CipherRegistry.get_cipher_class(cipher_type)
        ciphers.append(CipherInfo(
            cipher_type=cipher_type,
            name=cipher_class.name,
            cipher_family=cipher_class.cipher_family,
            description=cipher_class.description,
        ))

    return CipherListResponse(ciphers=ciphers)
