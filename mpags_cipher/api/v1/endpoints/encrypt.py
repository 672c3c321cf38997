import logging

from fastapi import APIRouter, HTTPException, status

from mpags_cipher.core.exceptions import (
    CipherNotFoundError,
    ConstructionError,
    ProcessingError,
    TextTooLongError,
)
from mpags_cipher.dependencies import ApplierDep, SettingsDep
from mpags_cipher.models.schemas import CipherMode, CipherRequest, CipherResponse, ErrorResponse
from mpags_cipher.services.engines.registry import CipherFactory
from mpags_cipher.services.preprocessing.sanitizer import TextSanitizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with a classical cipher, processing chunks of the text in parallel.",
)
def encrypt_plaintext(
    request: CipherRequest,
    settings: SettingsDep,
    applier: ApplierDep,
) -> CipherResponse:
    """
    Encrypt plaintext with a specified cipher type and key.

    The plaintext is reduced to A-Z and 0-9 before encryption. Declared
    without async so the blocking wait on the workers runs in the threadpool.
    """
    # Validate plaintext length
    if len(request.text) > settings.max_text_length:
        error = TextTooLongError(len(request.text), settings.max_text_length)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)

    try:
        cipher = CipherFactory.create(request.cipher_type, request.key)
    except CipherNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ConstructionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    sanitized = TextSanitizer().sanitize(request.text)

    try:
        result = applier.run(sanitized, cipher, CipherMode.ENCRYPT)
    except ProcessingError as e:
        logger.error("Encryption failed: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {e.message}",
        )

    return CipherResponse(
        output=result.output,
        cipher_type=cipher.cipher_type,
        mode=CipherMode.ENCRYPT,
        key_used=request.key,
        chunk_count=len(result.chunks),
        explanation=cipher.explain(CipherMode.ENCRYPT),
    )
