''' Picks a zoom level and focal point when entering free zoom from a
gesture, so that the content block under the gesture becomes legible. '''

from collections import namedtuple

from pagezoom import tools
from pagezoom.geometry import Block, Point, Size

#: xpos and ypos are None when no content block was found at the position.
RegionalZoom = namedtuple('RegionalZoom', 'zoom xpos ypos')


def _compensate_margin(zoom, margin, page_width):
    ''' Widens the view so the page margins on both sides stay visible. '''
    return zoom / (1 + 3 * margin / zoom / page_width)


def get_regional_zoom_center(document, view, page, pos, viewport, margin):
    ''' Computes the zoom and center for the content block at <pos>.
    @param document: DocumentGeometry of the open document.
    @param view: ZoomSink used to project <pos> into page space.
    @param page: The page number.
    @param pos: Screen Point of the gesture.
    @param viewport: Size of the viewport.
    @param margin: Page margin in screen pixels.
    @return: A RegionalZoom. Without a content block, only the zoom is set
    and the caller has to derive a center itself (see fallback_center). '''
    p_pos = view.get_single_page_position(pos)
    page_size = Size(*document.get_native_page_size(page))
    pos_x = tools.div(p_pos.x, page_size.w)
    pos_y = tools.div(p_pos.y, page_size.h)
    block = document.get_content_block(page, pos_x, pos_y)
    if block is not None:
        block = Block(*block)
        zoom = viewport.w / page_size.w / block.width()
        zoom = _compensate_margin(zoom, margin, page_size.w)
        xpos = block.center_x() * zoom * page_size.w
        ypos = p_pos.y / p_pos.zoom * zoom
        return RegionalZoom(zoom, xpos, ypos)
    zoom = 2 * viewport.w / page_size.w
    return RegionalZoom(_compensate_margin(zoom, margin, page_size.w),
                        None, None)


def fallback_center(pos, old_zoom, new_zoom):
    ''' Focal point for a gesture at <pos> when no content block was found:
    the raw position scaled by the zoom change. '''
    return Point(*pos).scale(tools.div(new_zoom, old_zoom))

# vim: expandtab:sw=4:ts=4
