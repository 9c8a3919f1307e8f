"""Core models and collaborator protocols.

Most types are re-exported here so applications can import them from a
single place.
"""

from strict_form.core.models import Accessor, FieldError, FieldNode, FieldOptions
from strict_form.core.protocols import DataMapper, Translator, ValueVoter, VoterSet

__all__ = [
    # Models
    "Accessor",
    "FieldError",
    "FieldNode",
    "FieldOptions",
    # Protocols
    "DataMapper",
    "Translator",
    "ValueVoter",
    "VoterSet",
]
