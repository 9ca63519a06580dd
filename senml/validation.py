"""
Structural validation of a pack.

The check is a single forward pass: the only information carried from a
record to the following ones is the base name in use and the version
declared so far, both kept into a ValidationState that is threaded through
validate_record().
"""
import logging
from typing import Iterable, NamedTuple, Optional

from .core import Record
from .names import validate_name
from .exceptions import (
    NameException,
    VersionConflict,
    InvalidRecordName,
    TooManyValues,
    MissingValue,
)


logger = logging.getLogger(__name__)


class ValidationState(NamedTuple):
    base_name: str = ''
    version: Optional[int] = None


def validate_record(state: ValidationState, record: Record, index: int = None) -> ValidationState:
    '''Check a single record given what has been seen before it and return the
    state for the next one.'''
    version = state.version
    if record.base_version != 0:
        if version is None:
            version = record.base_version
        elif record.base_version != version:
            raise VersionConflict(
                f'unallowed version change from {version} to {record.base_version}', index=index)

    base_name = record.base_name or state.base_name

    try:
        validate_name(base_name + record.name)
    except NameException as e:
        raise InvalidRecordName(e.message, index=index) from e

    count = record.value_count()
    if count > 1:
        raise TooManyValues('too many values', index=index)

    if record.sum is not None:
        count += 1
    if count < 1:
        raise MissingValue('no value or sum', index=index)

    return ValidationState(base_name=base_name, version=version)


def validate(pack: Iterable[Record]) -> None:
    """Raise a ValidationException at the first record breaking the rules."""
    state = ValidationState()
    for index, record in enumerate(pack):
        state = validate_record(state, record, index)

    logger.debug('pack is valid (version %s)', state.version)
