from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"


class CipherMode(str, Enum):
    """Direction in which a cipher is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    text: str = Field(min_length=1)
    # Resolved by CipherFactory so unknown types are reported as not found
    cipher_type: str = CipherType.CAESAR.value
    key: str = ""


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    output: str
    cipher_type: CipherType
    mode: CipherMode
    key_used: str
    chunk_count: int
    explanation: str


class CipherInfo(BaseModel):
    """Metadata for a registered cipher."""

    cipher_type: CipherType
    name: str
    cipher_family: CipherFamily
    description: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
