"""
SpaCy Loader — Centralized NLP resource management.

Provides shared spaCy model instances, one per model name, so every
session tagging with the same model reuses the loaded pipeline.
"""

from typing import Optional

from wordlevel.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.TAGGER)

# Lazy-loaded spaCy models by name
_models: dict[str, "spacy.language.Language"] = {}

# Default model name
DEFAULT_MODEL = "en_core_web_sm"

# Components the tagger never reads
_DISABLED = ("ner", "parser")


def get_nlp(model_name: Optional[str] = None) -> "spacy.language.Language":
    """
    Get or load a shared spaCy model.

    Args:
        model_name: The spaCy model to load (default: en_core_web_sm)

    Returns:
        The loaded spaCy Language model

    Raises:
        RuntimeError: If the model cannot be loaded
    """
    model_name = model_name or DEFAULT_MODEL

    if model_name not in _models:
        try:
            import spacy
            _models[model_name] = spacy.load(model_name, disable=list(_DISABLED))
        except OSError as e:
            raise RuntimeError(
                f"spaCy model '{model_name}' not found. "
                f"Install with: python -m spacy download {model_name}"
            ) from e
        log.info("tagger_loaded", backend="spacy", model=model_name)

    return _models[model_name]


def reset_nlp() -> None:
    """
    Reset the cached NLP models.

    Useful for testing or changing models at runtime.
    """
    _models.clear()


def is_loaded(model_name: Optional[str] = None) -> bool:
    """Check if the NLP model has been loaded."""
    return (model_name or DEFAULT_MODEL) in _models
