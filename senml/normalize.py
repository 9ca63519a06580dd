"""
Normalization resolves the base fields and the relative times of a pack
so that every record is self-contained.

RFC 8428 says that a time lower than 2**28 is relative to the current time:
the current time is read once for the whole pack so that all the records
share the same reference.
"""
import logging
import time as _time
from typing import Callable, Iterable, NamedTuple

from .core import Record, Pack


logger = logging.getLogger(__name__)

PIVOT = 2 ** 28
DEFAULT_VERSION = 5


class NormalizationState(NamedTuple):
    base_name: str = ''
    base_time: float = 0.0
    base_unit: str = ''
    version: int = DEFAULT_VERSION


def update_state(state: NormalizationState, record: Record) -> NormalizationState:
    '''Apply the base fields of the record, if any, to the state'''
    return NormalizationState(
        base_name=record.base_name or state.base_name,
        base_time=record.base_time or state.base_time,
        base_unit=record.base_unit or state.base_unit,
        version=record.base_version or state.version,
    )


def resolve_record(state: NormalizationState, record: Record, now: float) -> Record:
    resolved_time = state.base_time + record.time
    if resolved_time < PIVOT:
        resolved_time = now + resolved_time

    return record.copy(
        base_name='',
        base_time=0.0,
        base_unit='',
        base_version=state.version,
        name=state.base_name + record.name,
        unit=record.unit or state.base_unit,
        time=resolved_time,
    )


def normalize(pack: Iterable[Record], now: float = None, clock: Callable[[], float] = _time.time) -> Pack:
    """Return a new pack with the base fields folded into the records and with
    absolute times.

    Only the records with an entry of the value slot are kept: a record having
    only a sum is dropped, but its base fields still apply to the following ones."""
    if now is None:
        now = clock()

    state = NormalizationState()
    normalized = Pack()
    dropped = 0

    for record in pack:
        state = update_state(state, record)
        if not record.has_value():
            dropped += 1
            continue

        normalized.append(resolve_record(state, record, now))

    if dropped:
        logger.debug('dropped %d record(s) without value', dropped)

    return normalized
