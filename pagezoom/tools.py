"""tools.py - Contains various helper functions."""

import os
import sys


def get_home_directory():
    """On UNIX-like systems, this method will return the path of the home
    directory, e.g. /home/username. On Windows, it will return a PageZoom
    sub-directory of <Documents and Settings/Username>.
    """
    if sys.platform == 'win32':
        return os.path.join(os.path.expanduser('~'), 'PageZoom')
    else:
        return os.path.expanduser('~')


def get_config_directory():
    """Return the path to the PageZoom config directory. On UNIX, this will
    be $XDG_CONFIG_HOME/pagezoom, on Windows it will be the same directory as
    get_home_directory().

    See http://standards.freedesktop.org/basedir-spec/latest/ for more
    information on the $XDG_CONFIG_HOME environmental variable.
    """
    if sys.platform == 'win32':
        return get_home_directory()
    else:
        base_path = os.getenv('XDG_CONFIG_HOME',
            os.path.join(get_home_directory(), '.config'))
        return os.path.join(base_path, 'pagezoom')


def div(a, b):
    return float(a) / float(b)

def clamp(value, lower, upper):
    return min(max(value, lower), upper)

def scale(t, factor):
    return [x * factor for x in t]

# vim: expandtab:sw=4:ts=4
