''' Value types for sizes, points and content blocks. All of them are
immutable. '''

from collections import namedtuple

from pagezoom import tools


class Size(namedtuple('Size', 'w h')):
    ''' Width and height of a page, box or viewport. '''

    __slots__ = ()

    def fits_in(self, other):
        ''' Returns True if this Size is not larger than <other> in any
        dimension. '''
        return self.w <= other.w and self.h <= other.h

    def scale(self, factor):
        return Size(*tools.scale(self, factor))

    def transposed(self):
        return Size(self.h, self.w)


class Point(namedtuple('Point', 'x y')):
    ''' A screen or page position. '''

    __slots__ = ()

    def scale(self, factor):
        return Point(*tools.scale(self, factor))


class Block(namedtuple('Block', 'x0 y0 x1 y1')):
    ''' A content block, in fractions of the native page size. '''

    __slots__ = ()

    def width(self):
        return self.x1 - self.x0

    def center_x(self):
        return (self.x0 + self.x1) / 2.0

    def contains(self, x, y):
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1


#: A position projected into page space. <zoom> is the zoom the page
#: was displayed at when the projection was made.
PagePosition = namedtuple('PagePosition', 'x y zoom')

# vim: expandtab:sw=4:ts=4
