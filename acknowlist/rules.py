"""
Fixed keys and runtime settings for acknowledgements parsing.

Plist keys and the CocoaPods boilerplate texts are constants. The only
runtime setting is the upload size limit, read from the environment.
"""

from __future__ import annotations

import os

PREFERENCE_SPECIFIERS_KEY = "PreferenceSpecifiers"
TITLE_KEY = "Title"
FOOTER_TEXT_KEY = "FooterText"
LICENSE_KEY = "License"

DEFAULT_HEADER_TEXT = "This application makes use of the following third party libraries:"
DEFAULT_FOOTER_TEXT = "Generated by CocoaPods - https://cocoapods.org"

ACCEPTED_SUFFIX = ".plist"

MAX_UPLOAD_BYTES_ENV = "ACKNOWLIST_MAX_UPLOAD_BYTES"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def max_upload_bytes() -> int:
    raw = os.environ.get(MAX_UPLOAD_BYTES_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_MAX_UPLOAD_BYTES
    return value if value > 0 else DEFAULT_MAX_UPLOAD_BYTES
