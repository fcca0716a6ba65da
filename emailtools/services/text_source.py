"""Decoding of uploaded list files into text."""

import os

from emailtools.core.config import settings
from emailtools.core.logger import get_logger
from emailtools.utils.exceptions import UnreadableInputError

logger = get_logger(__name__)


def decode_upload(content: bytes, filename: str) -> str:
    """
    Decode an uploaded .txt/.csv file into text.
    
    Args:
        content: Raw file bytes
        filename: Client-supplied file name, used for the extension check
        
    Returns:
        Decoded text
        
    Raises:
        UnreadableInputError: If the file type, size or encoding is not acceptable
    """
    extension = os.path.splitext(filename or "")[1].lower()
    if extension not in settings.allowed_upload_extensions:
        logger.warning("Rejected upload", filename=filename, reason="extension")
        raise UnreadableInputError(
            f"Unsupported file type '{extension or filename}'. "
            f"Upload a {'/'.join(settings.allowed_upload_extensions)} file."
        )
    
    if len(content) > settings.max_upload_bytes:
        logger.warning("Rejected upload", filename=filename, reason="size", size=len(content))
        raise UnreadableInputError(
            f"File is too large ({len(content)} bytes, limit {settings.max_upload_bytes})."
        )
    
    if content.startswith(b'\xef\xbb\xbf'):
        content = content[3:]
    
    try:
        text = content.decode(settings.upload_encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Failed to decode upload", filename=filename, error=str(e))
        raise UnreadableInputError() from e
    
    logger.debug("Upload decoded", filename=filename, chars=len(text))
    return text
