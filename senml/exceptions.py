class SenMLException(Exception):
    '''Base class to extend in order to throw exception in senml.

    It takes the message and, when the error is related to a specific
    record, the position of that record into the pack.
    '''

    def __init__(self, message, index=None):
        self.message = message
        self.index = index
        super().__init__(message)

    def __str__(self):
        if self.index is None:
            return self.message

        return f'record {self.index}: {self.message}'


class ParseException(SenMLException):
    '''The input is not well formed for the selected format.'''
    pass


class HeaderMismatch(ParseException):
    pass


class NameException(SenMLException):
    pass


class EmptyName(NameException):
    pass


class InvalidName(NameException):
    pass


class ValidationException(SenMLException):
    '''The pack was decoded but it breaks one of the rules of RFC 8428.'''
    pass


class VersionConflict(ValidationException):
    pass


class InvalidRecordName(ValidationException):
    pass


class TooManyValues(ValidationException):
    pass


class MissingValue(ValidationException):
    pass


class InvalidPack(SenMLException):
    '''Raised by decode() when the decoded pack doesn't validate; the original
    ValidationException is available as __cause__.'''
    pass


class UnknownFormat(SenMLException, ValueError):
    pass


class EncodeException(SenMLException):
    '''The pack holds something the selected format can't represent.'''
    pass
