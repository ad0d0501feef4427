''' Rotation handling for zoom computations. Rotations are in degrees,
clockwise. Only quarter turns are expected from callers. '''

from pagezoom import tools


def normalize(rotation):
    ''' Returns <rotation> reduced to the range [0, 360). '''
    return int(rotation) % 360


def is_quarter_turn(rotation):
    ''' True if the page is displayed sideways (90 or 270 degrees). '''
    return normalize(rotation) % 180 != 0


def oriented_size(page_size, rotation):
    ''' Returns the page size as it appears on screen after rotation. '''
    if is_quarter_turn(rotation):
        return page_size.transposed()
    return page_size


def fit_ratios(viewport, page_size, rotation):
    ''' Returns (ratio_w, ratio_h): the zoom needed to fit the page width
    resp. height into the viewport. For 90 and 270 degrees, the page
    dimensions are swapped. '''
    assert viewport.w > 0 and viewport.h > 0, 'Viewport must not be empty'
    assert page_size.w > 0 and page_size.h > 0, 'Page must not be empty'
    oriented = oriented_size(page_size, rotation)
    return tools.div(viewport.w, oriented.w), tools.div(viewport.h, oriented.h)

# vim: expandtab:sw=4:ts=4
