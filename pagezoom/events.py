''' Notifications emitted by the zoom controller. Observers receive
instances of these classes, in the order the controller produced them. '''

from collections import namedtuple

#: The active zoom mode changed.
ModeChanged = namedtuple('ModeChanged', 'mode')
#: A new zoom value was computed. 0 means no zoom could be fitted into
#: the render cache budget; nothing should be rendered at it.
ZoomChanged = namedtuple('ZoomChanged', 'zoom')
#: Scroll positions should be reset for the given mode (may be None).
InitScrollState = namedtuple('InitScrollState', 'mode')
#: The used-content bounding box changed (None if the full page is used).
BBoxChanged = namedtuple('BBoxChanged', 'bbox')
#: Pan or column settings changed. <fields> maps setting names to values.
PanSettingsChanged = namedtuple('PanSettingsChanged', 'fields')
#: The current page should be redrawn.
RequestRedraw = namedtuple('RequestRedraw', '')
#: The mode does not work well with continuous (scroll) view. <kind> is
#: constants.ADVISORY_PAGED or constants.ADVISORY_PANNED.
ModeAdvisory = namedtuple('ModeAdvisory', 'mode kind')

# vim: expandtab:sw=4:ts=4
