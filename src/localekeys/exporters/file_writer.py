"""Write generated modules to disk."""

import os
import tempfile
from pathlib import Path

from localekeys.core.constants import SourceFiles
from localekeys.core.exceptions import ExportError
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


def encode_generated(text: str, output_path: Path) -> bytes:
    """
    Encode generated source as UTF-8.

    Raises:
        ExportError: If ``text`` cannot be encoded
    """
    try:
        return text.encode(SourceFiles.ENCODING)
    except UnicodeEncodeError as e:
        raise ExportError(f"Generated source is not encodable: {e}", output_path)


def write_generated_bytes(output_path: Path, data: bytes) -> Path:
    """
    Replace ``output_path`` with ``data``.

    The bytes go to a temporary file beside the target, which is then
    renamed over it, so the target is never left truncated. Parent
    directories are created when missing.

    Args:
        output_path: Destination file
        data: Encoded generated source

    Returns:
        The path written

    Raises:
        ExportError: If the directory or file cannot be written
    """
    output_path = Path(output_path)
    temp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            'wb', dir=output_path.parent, prefix=f".{output_path.name}.",
            suffix='.tmp', delete=False
        ) as f:
            temp_name = f.name
            f.write(data)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, output_path)
    except OSError as e:
        if temp_name is not None and os.path.exists(temp_name):
            os.remove(temp_name)
        raise ExportError(f"Failed to write generated file: {e}", output_path)

    logger.debug(f"Wrote {len(data)} bytes to {output_path}")
    return output_path


def write_generated_file(output_path: Path, text: str) -> Path:
    """
    Write ``text`` to ``output_path``, replacing any existing file.

    Raises:
        ExportError: If the text cannot be encoded or the file cannot be written
    """
    return write_generated_bytes(output_path, encode_generated(text, output_path))
