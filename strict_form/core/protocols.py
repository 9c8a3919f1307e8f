"""Collaborator protocols.

The mapper depends on three pluggable collaborators: a fallback data
mapper for fields without accessors, a translator for error messages and a
set of value voters.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol, runtime_checkable

from strict_form.core.models import FieldNode


@runtime_checkable
class DataMapper(Protocol):
    """Protocol for mapping record values to and from field nodes.

    Implementations handle a batch of nodes and must not raise for nodes
    they cannot map.
    """

    def map_data_to_forms(self, data: Any, forms: Sequence[FieldNode]) -> None:
        """Populate node values from the record."""
        ...

    def map_forms_to_data(self, forms: Sequence[FieldNode], data: Any) -> Any:
        """Write node values into the record and return it."""
        ...


@runtime_checkable
class Translator(Protocol):
    """Protocol for rendering translatable message keys."""

    def translate(self, key: str, parameters: dict[str, Any] | None = None) -> str:
        """Return the display string for a message key."""
        ...


@runtime_checkable
class ValueVoter(Protocol):
    """Protocol for voting on whether a submitted value should be written.

    Returns True or False to decide, or None to abstain.
    """

    def vote(self, form: FieldNode, original: Any, submitted: Any) -> bool | None:
        ...


class VoterSet:
    """An injectable collection of value voters.

    Neither reconciliation path consults the voters yet; the set is carried
    by the mapper so conditional reconciliation can be added without
    changing how mappers are constructed.
    """

    def __init__(self, voters: Iterable[ValueVoter] = ()) -> None:
        self._voters: list[ValueVoter] = []
        for voter in voters:
            self.add(voter)

    def add(self, voter: ValueVoter) -> None:
        if not isinstance(voter, ValueVoter):
            raise TypeError(f"Expected a ValueVoter, got {type(voter).__name__}")
        self._voters.append(voter)

    def __iter__(self) -> Iterator[ValueVoter]:
        return iter(self._voters)

    def __len__(self) -> int:
        return len(self._voters)
