'''
Name grammar of SenML: a name starts with an alphanumeric character and
goes on with alphanumeric characters or one of "-", ":", ".", "/", "_".
'''
import re

from .exceptions import EmptyName, InvalidName


VALID_NAME = re.compile(r'[a-zA-Z0-9][a-zA-Z0-9\-:./_]*')


def validate_name(name: str) -> None:
    if len(name) == 0:
        raise EmptyName('empty name')

    if not VALID_NAME.fullmatch(name):
        raise InvalidName(
            f'invalid name \'{name}\': must begin with alphanumeric and contain alphanumeric or one of - : . / _')
