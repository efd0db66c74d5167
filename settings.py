# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-02-03
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Chunking
# -----------------------------------------------------------------------------
CHUNK_SIZE_CHARS = _env_int("MEETING_CHUNK_SIZE", 500)
CHUNK_OVERLAP_CHARS = _env_int("MEETING_CHUNK_OVERLAP", 100)


# -----------------------------------------------------------------------------
# Vector dimension
# -----------------------------------------------------------------------------
# New preferred env var:
VECTOR_TARGET_DIM = _env_int("MEETING_VECTOR_DIM", 0)

# Backwards-compatible fallback to the Pinecone index dimension:
if not VECTOR_TARGET_DIM:
    VECTOR_TARGET_DIM = _env_int("PINECONE_INDEX_DIM", 0)

if not VECTOR_TARGET_DIM:
    VECTOR_TARGET_DIM = 1024

# "pad_truncate" adapts every vector to VECTOR_TARGET_DIM, "strict" rejects mismatches
DIMENSION_POLICY = _env("MEETING_DIMENSION_POLICY", "pad_truncate").lower()


# -----------------------------------------------------------------------------
# Retrieval
# -----------------------------------------------------------------------------
DEFAULT_TOP_K = _env_int("MEETING_DEFAULT_TOP_K", 5)


# -----------------------------------------------------------------------------
# Backends / providers (selected once when the AppContainer is built)
# -----------------------------------------------------------------------------
VECTOR_BACKEND = _env("MEETING_VECTOR_BACKEND", "chroma").lower()
VECTOR_COLLECTION_DEFAULT = _env("MEETING_VECTOR_COLLECTION", "meeting_context_knowledge")

INSIGHTS_PROVIDER = _env("MEETING_INSIGHTS_PROVIDER", "azure").lower()

LOCAL_EMBED_MODEL = _env("MEETING_LOCAL_EMBED_MODEL", "sentence-transformers/all-MiniLM-L6-v2")

# Skip the remote embedder entirely (useful for offline demos)
FORCE_LOCAL_EMBEDDINGS = _env_bool("MEETING_FORCE_LOCAL_EMBEDDINGS", False)


# -----------------------------------------------------------------------------
# Metadata defaults
# -----------------------------------------------------------------------------
DEFAULT_PROJECT_NAME = "General Discussion"
DEFAULT_DEPARTMENT = "General"
SEARCH_STRING_FALLBACK_CHARS = 200


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
KNOWN_VECTOR_BACKENDS = ("chroma", "pinecone")
KNOWN_INSIGHTS_PROVIDERS = ("azure", "openai", "gemini", "simulated")
KNOWN_DIMENSION_POLICIES = ("pad_truncate", "strict")

if CHUNK_SIZE_CHARS <= 0:
    raise RuntimeError("CHUNK_SIZE_CHARS must be positive")

if not 0 <= CHUNK_OVERLAP_CHARS < CHUNK_SIZE_CHARS:
    raise RuntimeError(
        f"CHUNK_OVERLAP_CHARS ({CHUNK_OVERLAP_CHARS}) must be >= 0 and < CHUNK_SIZE_CHARS ({CHUNK_SIZE_CHARS})"
    )

if VECTOR_TARGET_DIM <= 0:
    raise RuntimeError("VECTOR_TARGET_DIM resolved to a non-positive value")

if DEFAULT_TOP_K <= 0:
    raise RuntimeError("DEFAULT_TOP_K must be positive")

if VECTOR_BACKEND not in KNOWN_VECTOR_BACKENDS:
    raise RuntimeError(f"MEETING_VECTOR_BACKEND must be one of {KNOWN_VECTOR_BACKENDS}, got {VECTOR_BACKEND!r}")

if INSIGHTS_PROVIDER not in KNOWN_INSIGHTS_PROVIDERS:
    raise RuntimeError(
        f"MEETING_INSIGHTS_PROVIDER must be one of {KNOWN_INSIGHTS_PROVIDERS}, got {INSIGHTS_PROVIDER!r}"
    )

if DIMENSION_POLICY not in KNOWN_DIMENSION_POLICIES:
    raise RuntimeError(
        f"MEETING_DIMENSION_POLICY must be one of {KNOWN_DIMENSION_POLICIES}, got {DIMENSION_POLICY!r}"
    )
