import io
import logging
import os


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around path/bytes/file object to
    uniform its properties: the codecs work on bytes, this is where the
    bytes come from or go to.

    The underlying file is closed only if it was opened here.'''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal binary file object'''
        if flags not in ('r', 'w'):
            raise ValueError(f'flags must be \'r\' or \'w\', not \'{flags}\'')

        self.flags = flags
        self.obj = obj
        self._owned = False

        if isinstance(self.obj, os.PathLike):
            init_method_name = 'init_path'
        else:
            init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self._owned:
            self.obj.close()

    def _open(self, path):
        logger.debug('opening path \'%s\'' % path)
        self.obj = open(path, 'rb' if self.flags == 'r' else 'wb')
        self._owned = True

    def init_str(self):
        '''We think this is a path'''
        self._open(self.obj)

    def init_path(self):
        '''Any os.PathLike, pathlib.Path included'''
        self._open(os.fspath(self.obj))

    def init_bytes(self):
        '''We think these are raw bytes'''
        if self.flags != 'r':
            raise ValueError('cannot write into bytes')
        self.obj = io.BytesIO(self.obj)
        self._owned = True

    def init_bytearray(self):
        self.obj = bytes(self.obj)
        self.init_bytes()

    def init_file(self):
        '''Anything else must look like a binary file'''
        method = 'read' if self.flags == 'r' else 'write'
        if not hasattr(self.obj, method):
            raise TypeError(f'\'{self.obj.__class__.__name__}\' object has no {method}() method')

    def read_all(self) -> bytes:
        data = self.obj.read()
        if isinstance(data, str):
            raise TypeError('the file must be opened in binary mode')

        return data

    def write(self, data: bytes):
        return self.obj.write(data)
