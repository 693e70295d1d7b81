"""
Load the root mapping of an acknowledgements plist.

Never raises: any read or parse failure yields an empty mapping, which the
parser turns into empty output.
"""

from __future__ import annotations

import logging
import plistlib
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

_BINARY_MAGIC = b"bplist00"
_XML_DECL_ENCODING = re.compile(r"""(<\?xml[^>]*?encoding\s*=\s*)(["'])[^"']*\2""")


def _reencode_as_utf8(raw: bytes) -> Optional[bytes]:
    """Decode with the detected encoding and re-emit UTF-8 with a matching declaration."""
    match = from_bytes(raw).best()
    if match is None:
        return None
    text = str(match)
    text = _XML_DECL_ENCODING.sub(r'\1\2UTF-8\2', text, count=1)
    return text.encode("utf-8")


def _parse(raw: bytes) -> Any:
    try:
        return plistlib.loads(raw)
    except Exception as first_error:
        if raw.startswith(_BINARY_MAGIC):
            raise
        # mislabeled encodings are common in hand-edited license files
        fixed = _reencode_as_utf8(raw)
        if fixed is None or fixed == raw:
            raise
        logger.info("Retrying plist parse after re-encoding to UTF-8 (%s)", first_error)
        return plistlib.loads(fixed)


def load_root_document(raw: bytes) -> Dict[str, Any]:
    if not raw:
        logger.warning("Empty plist payload")
        return {}

    try:
        root = _parse(raw)
    except Exception:
        logger.warning("Could not parse plist payload (%d bytes)", len(raw), exc_info=True)
        return {}

    if not isinstance(root, dict):
        logger.warning("Plist root is %s, expected a dictionary", type(root).__name__)
        return {}
    return root


def load_root_document_from_path(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        raw = Path(path).read_bytes()
    except OSError:
        logger.warning("Could not read plist file %s", path, exc_info=True)
        return {}
    return load_root_document(raw)
