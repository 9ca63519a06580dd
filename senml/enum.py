from enum import Enum, IntEnum


class Format(Enum):
    '''The encodings a pack can be converted from/to'''
    JSON     = 1
    XML      = 2
    CBOR     = 3
    CSV      = 4
    MPACK    = 5
    LINEP    = 6
    JSONLINE = 7


class Label(IntEnum):
    '''Integer keys used in place of the textual names by the binary formats
    (RFC 8428, section 6).'''
    BASE_VERSION = -1
    BASE_NAME    = -2
    BASE_TIME    = -3
    BASE_UNIT    = -4
    NAME         = 0
    UNIT         = 1
    VALUE        = 2
    STRING_VALUE = 3
    BOOL_VALUE   = 4
    SUM          = 5
    TIME         = 6
    UPDATE_TIME  = 7
    DATA_VALUE   = 8
