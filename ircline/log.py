# log.py
# Thin wrapper around Python's logging module.
import logging

__all__ = [ 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'FATAL', 'Logger' ]


# Log levels.
FATAL = logging.FATAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
DEBUG = logging.DEBUG


class Logger:
    """
    Thin wrapper around Python's logging module.
    Messages use advanced string formatting and are only formatted when the level is enabled,
    so codecs can log rejected input without paying for it when nobody listens.
    """
    FORMAT = '{asctime} [{name}] {levelname}: {message}'
    DATE_FORMAT = None
    FILE = None
    LEVEL = logging.WARNING

    def __init__(self, name, file=None, formatter=None, level=None):
        self._name = name
        self._file = file or self.FILE
        self._level = level if level is not None else self.LEVEL
        self._formatter = formatter or logging.Formatter(self.FORMAT, datefmt=self.DATE_FORMAT, style='{')
        self.refresh_logger()

    def refresh_logger(self):
        """ Recreate logger instance. """
        self.logger = logging.Logger(self._name)
        self.logger.setLevel(self._level)

        handler = logging.StreamHandler()
        handler.setFormatter(self._formatter)
        self.logger.addHandler(handler)

        if self._file:
            handler = logging.FileHandler(self._file)
            handler.setFormatter(self._formatter)
            self.logger.addHandler(handler)


    @property
    def name(self):
        """ This logger's identifier. """
        return self._name

    @name.setter
    def name(self, value):
        self._name = value
        self.refresh_logger()

    @property
    def level(self):
        """ Minimum level that gets emitted. """
        return self._level

    @level.setter
    def level(self, value):
        self._level = value
        self.logger.setLevel(value)

    @property
    def file(self):
        """ The file we are logging to, if any. """
        return self._file

    @file.setter
    def file(self, value):
        self._file = value
        self.refresh_logger()

    @property
    def formatter(self):
        """ The formatter we are using. """
        return self._formatter

    @formatter.setter
    def formatter(self, value):
        self._formatter = value
        self.refresh_logger()


    def log(self, level, message, *args, **kwargs):
        """ Log message at given level. """
        if self.logger.isEnabledFor(level):
            self.logger.log(level, message.format(*args, **kwargs))

    def debug(self, message, *args, **kwargs):
        self.log(DEBUG, message, *args, **kwargs)

    def inform(self, message, *args, **kwargs):
        self.log(INFO, message, *args, **kwargs)

    def warn(self, message, *args, **kwargs):
        self.log(WARNING, message, *args, **kwargs)

    def err(self, message, *args, **kwargs):
        self.log(ERROR, message, *args, **kwargs)
