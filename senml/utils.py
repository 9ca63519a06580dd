import math
from decimal import Decimal


TRUE_STRINGS = ('1', 't', 'T', 'TRUE', 'true', 'True')
FALSE_STRINGS = ('0', 'f', 'F', 'FALSE', 'false', 'False')


def format_float(value: float) -> str:
    '''Return the shortest decimal representation that reads back as the same
    float, without exponent and without trailing zeros (946684800.0 becomes
    "946684800", 1e-07 becomes "0.0000001").'''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'

    text = format(Decimal(repr(float(value))), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')

    return text


def format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def parse_bool(text: str) -> bool:
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False

    raise ValueError(f'invalid boolean \'{text}\'')
