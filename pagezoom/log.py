# -*- coding: utf-8 -*-

""" Logging module for PageZoom. Provides a logger 'pagezoom' with a few
pre-configured settings. Functions in this module are redirected to
this default logger. """

import logging
import sys
from logging import DEBUG, INFO, WARNING, ERROR

__all__ = ['debug', 'info', 'warning', 'error', 'setLevel',
           'DEBUG', 'INFO', 'WARNING', 'ERROR']

def print_(*args, **options):
    """ Prints <args> to STDOUT, with each argument separated by sep=' ' and
    ending with end='\n'. Characters the console encoding cannot represent
    are replaced instead of raising UnicodeEncodeError. """

    sep = options.get('sep', ' ')
    end = options.get('end', '\n')
    stream = sys.stdout
    if stream is None:
        return
    text = sep.join(str(val) for val in args) + end
    encoding = getattr(stream, 'encoding', None) or 'utf-8'
    stream.write(text.encode(encoding, 'replace').decode(encoding))

class PrintHandler(logging.Handler):
    """ Handler using L{print_} to output messages. """

    def __init__(self):
        logging.Handler.__init__(self)

    def emit(self, record):
        print_(self.format(record))

# Set up default logger.
__logger = logging.getLogger('pagezoom')
if not __logger.handlers:
    __handler = PrintHandler()
    __handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s',
        '%H:%M:%S'))
    __logger.handlers = [ __handler ]

# The following functions direct all input to __logger.

debug = __logger.debug
info = __logger.info
warning = __logger.warning
error = __logger.error
setLevel = __logger.setLevel


# vim: expandtab:sw=4:ts=4
