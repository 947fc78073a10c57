# src/bencodec/config.py
import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_depth(name: str, default: int):
    """Read a depth limit; '0' or 'none' disables the limit."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    raw = raw.strip().lower()
    if raw in ('0', 'none', 'off'):
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


# --- General ---
LOG_LEVEL = os.environ.get('BENCODEC_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# --- Integer range ---
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# --- Decoder ---
# Python's default recursion limit is 1000 and each nesting level costs a few frames
MAX_NESTING_DEPTH = _env_depth('BENCODEC_MAX_DEPTH', 250)
STRICT_DECODING = _env_flag('BENCODEC_STRICT')
