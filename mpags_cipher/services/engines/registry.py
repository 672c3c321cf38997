import logging
from typing import Type

from mpags_cipher.core.exceptions import CipherNotFoundError
from mpags_cipher.models.schemas import CipherFamily, CipherType
from mpags_cipher.services.engines.base import Cipher

logger = logging.getLogger(__name__)


class CipherRegistry:
    """
    Registry for cipher classes.

    Manages available ciphers and provides lookup by type or family.
    """

    _ciphers: dict[CipherType, Type[Cipher]] = {}

    @classmethod
    def register(cls, cipher_class: Type[Cipher]) -> Type[Cipher]:
        """
        Register a cipher class.

        Can be used as a decorator:
            @CipherRegistry.register
            class CaesarCipher(Cipher):
                ...

        Args:
            cipher_class: The cipher class to register

        Returns:
            The cipher class (for decorator usage)
        """
        cls._ciphers[cipher_class.cipher_type] = cipher_class
        return cipher_class

    @classmethod
    def get_cipher_class(cls, cipher_type: CipherType) -> Type[Cipher] | None:
        """
        Get the class implementing the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Cipher class or None if not found
        """
        return cls._ciphers.get(cipher_type)

    @classmethod
    def get_classes_by_family(cls, family: CipherFamily) -> list[Type[Cipher]]:
        """Get all cipher classes belonging to a cipher family."""
        return [c for c in cls._ciphers.values() if c.cipher_family == family]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._ciphers.keys())


class CipherFactory:
    """Builds a keyed cipher instance from a cipher type and a key."""

    @staticmethod
    def create(cipher_type: CipherType | str, key: str = "") -> Cipher:
        """
        Validate the key and construct the requested cipher.

        Args:
            cipher_type: The type of cipher (enum member or its value)
            key: The cipher key

        Returns:
            A ready-to-use cipher instance

        Raises:
            CipherNotFoundError: If the cipher type is unknown
            InvalidKeyError: If the key is not valid for the cipher
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise CipherNotFoundError(str(cipher_type)) from None

        cipher_class = CipherRegistry.get_cipher_class(cipher_type)
        if cipher_class is None:
            raise CipherNotFoundError(cipher_type.value)

        cipher = cipher_class(key)
        logger.debug("Constructed %r", cipher)
        return cipher


# Import ciphers to trigger registration
def _load_ciphers() -> None:
    """Load all cipher modules to trigger registration."""
    from mpags_cipher.services.engines.monoalphabetic import caesar  # noqa: F401
    from mpags_cipher.services.engines.polyalphabetic import vigenere  # noqa: F401
    from mpags_cipher.services.engines.polygraphic import playfair  # noqa: F401


# Load ciphers when module is imported
_load_ciphers()
