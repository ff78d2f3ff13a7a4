"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<action>

    component: shape, scene, error
    action: created, rejected, rendered, loaded, saved
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape construction and rendering
    - scene.*: Scene loading, rendering and output
    - error.*: Error conditions
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape validated and its bounding box computed."""

    SHAPE_REJECTED = "shape.rejected"
    """Shape construction failed validation."""

    SHAPE_RENDERED = "shape.rendered"
    """Shape scanned over its bounding box and pixels emitted."""

    # ========== Scene Events ==========
    SCENE_LOADED = "scene.loaded"
    """Scene configuration parsed from YAML."""

    SCENE_RENDERED = "scene.rendered"
    """All shapes of a scene rendered onto a frame."""

    SCENE_SAVED = "scene.saved"
    """Rendered frame written to disk."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Scene configuration failed to load or validate."""

    OUTPUT_ERROR = "error.output"
    """Rendered frame could not be written."""

