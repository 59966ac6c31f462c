"""Encoding detection and clean-up for cue sheet text"""
import codecs

import chardet


def _decode(raw_data, encoding, log_func):
    try:
        return raw_data.decode(encoding, errors="ignore")
    except LookupError:
        log_func(f"⚠️ Unknown encoding {encoding!r}, falling back to UTF-8")
        return None


def _detect_encoding(raw_data, log_func):
    """Ask chardet for the encoding of raw_data; None when it has no idea"""
    result = chardet.detect(raw_data)
    if result is None:
        log_func("⚠️ Could not detect encoding, using UTF-8")
        return None

    detected_encoding = result.get("encoding")
    confidence = result.get("confidence") or 0
    if not detected_encoding:
        log_func("⚠️ Could not detect encoding, using UTF-8")
        return None

    log_func(f"📝 CUE file encoding detected: {detected_encoding} (confidence: {confidence:.2%})")
    return detected_encoding


def normalize_cue_text(raw_data, encoding=None, detect=False, log_func=None):
    """
    Turn raw cue sheet content into text that is safe to parse.

    Bytes that cannot be decoded are dropped rather than reported, so this
    never fails on malformed input.

    Args:
        raw_data: Cue sheet content as bytes or str
        encoding: Codec to decode bytes with (default: UTF-8)
        detect: Guess the codec with chardet when the bytes are not UTF-8
        log_func: Function to call for logging messages

    Returns:
        Cleaned up text
    """
    if log_func is None:
        log_func = lambda msg: None

    if isinstance(raw_data, str):
        text = raw_data
    else:
        if raw_data.startswith(codecs.BOM_UTF8):
            raw_data = raw_data[len(codecs.BOM_UTF8):]

        text = None
        if encoding:
            text = _decode(raw_data, encoding, log_func)
        elif detect:
            try:
                raw_data.decode("utf-8")
            except UnicodeDecodeError:
                detected_encoding = _detect_encoding(raw_data, log_func)
                if detected_encoding:
                    text = _decode(raw_data, detected_encoding, log_func)

        if text is None:
            text = raw_data.decode("utf-8", errors="ignore")

    # Round trip through UTF-16 drops whatever is left that cannot be encoded
    # (lone surrogates from str input or a permissive codec)
    return text.encode("utf-16", errors="ignore").decode("utf-16", errors="ignore")


def read_cue_file(cue_path, encoding=None, detect=False, log_func=None):
    """Read a cue sheet from disk and clean up its encoding"""
    with open(cue_path, "rb") as f:
        raw_data = f.read()
    return normalize_cue_text(raw_data, encoding=encoding, detect=detect, log_func=log_func)
