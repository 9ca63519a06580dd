import pytest

from senml import Record, Pack


REFERENCE_BASE_TIME = 946684800.0


def build_reference_pack(absolute_time=False):
    '''Four records sharing base name and unit: a temperature with a sum, a
    string, a data and a boolean value.'''
    return Pack([
        Record(
            base_name='dev123',
            base_time=REFERENCE_BASE_TIME if absolute_time else -45.67,
            base_unit='degC',
            base_version=5,
            name='temp',
            unit='degC',
            time=-1,
            update_time=10,
            value=22.1,
            sum=0,
        ),
        Record(name='room', time=-1, string_value='kitchen'),
        Record(name='data', data_value='abc'),
        Record(name='ok', bool_value=True),
    ])


@pytest.fixture
def reference_pack():
    return build_reference_pack()


@pytest.fixture
def absolute_pack():
    return build_reference_pack(absolute_time=True)


@pytest.fixture
def fixed_clock():
    '''A clock always returning the same instant, counting the calls'''
    def clock():
        clock.calls += 1
        return 1_600_000_000.0

    clock.calls = 0

    return clock
