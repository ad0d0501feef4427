'''render_cache.py - Admission policy for decoded page bitmaps.

The zoom engine only asks the render cache whether it would take a bitmap
of a given cost; it never stores anything itself. Hosts that already have
a render cache pass their own admission predicate instead.
'''

from PIL import Image

from pagezoom.preferences import prefs

#: Bytes per band for PIL base types other than 8 bit.
_WIDE_MODE_TYPES = {'I': 4, 'F': 4}


def bytes_per_pixel(mode):
    ''' Returns the memory one pixel takes in a bitmap of PIL <mode>. '''
    bands = Image.getmodebands(mode)
    return bands * _WIDE_MODE_TYPES.get(Image.getmodetype(mode), 1)


class RenderCache(object):

    '''Describes the memory budget of a render cache. Costs passed in are
    pixel counts; they are converted to bytes using the bitmap mode.
    '''

    def __init__(self, max_memsize=None, mode=None):
        if max_memsize is None:
            max_memsize = prefs['render_cache_size']
        if mode is None:
            mode = prefs['render_cache_mode']
        #: Budget in bytes
        self.max_memsize = max_memsize
        #: PIL mode of cached bitmaps
        self.mode = mode
        self._bytes_per_pixel = bytes_per_pixel(mode)

    def will_accept(self, size):
        ''' Returns True if a bitmap of <size> pixels could be stored. A
        single bitmap may use at most 75% of the budget. '''
        return size * self._bytes_per_pixel * 4 < self.max_memsize * 3

# vim: expandtab:sw=4:ts=4
