# -*- coding: utf-8 -*-
''' controller.py - Zoom mode handling for one open document view.

The controller owns the zoom state of a view. Every event that can change
the zoom (page turn, rotation, resize, mode switch, gestures) ends up in
set_zoom(), which resolves the effective page size, fits it into the
viewport and keeps the result within the render cache budget.
'''

from pagezoom import bbox
from pagezoom import cache_budget
from pagezoom import callback
from pagezoom import constants
from pagezoom import events
from pagezoom import keybindings_map
from pagezoom import log
from pagezoom import regional
from pagezoom import render_cache
from pagezoom import rotation
from pagezoom import tools
from pagezoom import zoom as zoom_model
from pagezoom.constants import ZoomMode
from pagezoom.geometry import Point, Size
from pagezoom.preferences import prefs
from pagezoom.settings import ZoomSettings, resolve_mode

_SPREAD_MODES = {
    constants.GESTURE_HORIZONTAL: ZoomMode.CONTENT_WIDTH,
    constants.GESTURE_VERTICAL: ZoomMode.CONTENT_HEIGHT,
    constants.GESTURE_DIAGONAL: ZoomMode.CONTENT,
}

_PINCH_MODES = {
    constants.GESTURE_DIAGONAL: ZoomMode.PAGE,
    constants.GESTURE_HORIZONTAL: ZoomMode.PAGE_WIDTH,
    constants.GESTURE_VERTICAL: ZoomMode.PAGE_HEIGHT,
}

_ZOOM_FACTORS = {
    constants.ZOOM_IN: constants.ZOOM_IN_FACTOR,
    constants.ZOOM_OUT: constants.ZOOM_OUT_FACTOR,
}


class ZoomState(object):
    ''' Mutable zoom state of a document view. '''

    def __init__(self, viewport, settings):
        #: Active ZoomMode. None until the first mode is set, so that the
        #: first set_mode() always applies.
        self.mode = None
        self.zoom = zoom_model.IDENTITY_ZOOM
        #: Zoom before entering free zoom from a gesture.
        self.saved_zoom = None
        #: Mode before entering flipping mode.
        self.saved_mode = None
        self.current_page = 1
        self.rotation = 0
        self.viewport = Size(*viewport)
        #: Used-content box the zoom was last fitted against, or None.
        self.bbox = None
        self.pan_factor = settings.zoom_factor
        self.overlap_h = settings.overlap_h
        self.overlap_v = settings.overlap_v
        self.right_to_left = settings.right_to_left
        self.bottom_to_top = settings.bottom_to_top
        self.vertical_pan = settings.vertical_pan
        self.footer_height = settings.footer_height
        self.footer_reclaim_height = settings.footer_reclaim_height


class ZoomController(object):

    def __init__(self, document, view, viewport, settings=None,
                 will_accept=None, schedule=None, observer=None):
        ''' @param document: DocumentGeometry of the open document.
        @param view: ZoomSink receiving zoom results.
        @param viewport: Size of the page area on screen.
        @param settings: Resolved ZoomSettings (see settings.resolve).
        @param will_accept: Render cache admission predicate. Defaults to
        a RenderCache built from the preferences.
        @param schedule: cache_budget.StepSchedule for over-large zooms.
        @param observer: Optional function receiving every notification. '''
        if settings is None:
            settings = ZoomSettings()
        if will_accept is None:
            will_accept = render_cache.RenderCache().will_accept
        self.settings = settings
        self.state = ZoomState(viewport, settings)
        self._document = document
        self._view = view
        self._bbox = bbox.BBoxResolver(document, view)
        self._budget = cache_budget.CacheBudget(will_accept, schedule)
        #: Result of the last budget-checked zoom computation.
        self._last_zoom = None
        if observer is not None:
            self.notify += observer

    @callback.Callback
    def notify(self, notification):
        ''' Hands <notification> to all registered observers. '''
        pass

    @property
    def mode(self):
        return self.state.mode

    @property
    def zoom(self):
        return self.state.zoom

    def read_settings(self, settings):
        ''' Applies resolved settings, e.g. after a document was opened. '''
        self.settings = settings
        state = self.state
        state.pan_factor = settings.zoom_factor
        for key in constants.PAN_OVERLAP_SETTINGS + constants.PAN_FLAG_SETTINGS:
            setattr(state, key, getattr(settings, key))
        state.footer_height = settings.footer_height
        state.footer_reclaim_height = settings.footer_reclaim_height
        # no advisory on load
        self.set_mode(settings.zoom_mode, no_warning=True)

    def save_settings(self, doc_settings):
        ''' Stores the per-document zoom settings in <doc_settings>. While
        flipping mode overrides the zoom mode, the overridden mode is saved. '''
        mode = self.state.saved_mode or self.state.mode
        if mode is not None:
            doc_settings.save_setting('zoom_mode', mode.value)
        doc_settings.save_setting('zoom_factor', self.state.pan_factor)
        for key in constants.PAN_OVERLAP_SETTINGS + constants.PAN_FLAG_SETTINGS:
            doc_settings.save_setting(key, getattr(self.state, key))

    def set_mode(self, mode, no_warning=False):
        ''' Switches to <mode> (a ZoomMode or its name). Unknown names
        select the default mode. '''
        mode = resolve_mode(mode, self.settings.default_mode)
        if not no_warning and self.settings.page_scroll:
            if mode in constants.PAGED_MODES:
                self.notify(events.ModeAdvisory(mode, constants.ADVISORY_PAGED))
            elif mode in constants.PANNED_MODES:
                self.notify(events.ModeAdvisory(mode, constants.ADVISORY_PANNED))
        if not self._apply_mode(mode):
            self.notify(events.InitScrollState(mode))

    def _apply_mode(self, mode, recompute=True):
        ''' Makes <mode> the active mode and, unless <recompute> is False,
        recomputes the zoom. Nothing happens if it already is the active mode.
        @return: True if the mode changed. '''
        if mode is self.state.mode:
            return False
        log.info('Setting zoom mode to %s', mode.value)
        self.state.mode = mode
        self.notify(events.ModeChanged(mode))
        if recompute:
            self.set_zoom()
        self.notify(events.InitScrollState(mode))
        return True

    def set_zoom(self):
        ''' Recomputes the zoom for the current page and tells the view.
        @return: The new zoom, or None if nothing was recomputed. '''
        state = self.state
        if state.mode is None:
            log.debug('No zoom mode set yet, not computing zoom')
            return None
        page_size, page_bbox = self._bbox.resolve(state.current_page,
                                                  state.mode)
        if page_bbox != state.bbox:
            state.bbox = page_bbox
            self.notify(events.BBoxChanged(page_bbox))
        fit_viewport = zoom_model.usable_viewport(
            state.viewport, state.footer_height, state.footer_reclaim_height)
        zoom = zoom_model.calculate_zoom(state.mode, fit_viewport, page_size,
                                         state.rotation, state.pan_factor,
                                         state.zoom)
        if zoom is None:
            return None
        zoom = self._budget.limit(zoom, state.viewport)
        self._last_zoom = zoom
        if zoom == cache_budget.NO_VIABLE_ZOOM:
            log.warning('No zoom fits into the render cache for page %u '
                        'at %ux%u', state.current_page, state.viewport.w,
                        state.viewport.h)
        else:
            state.zoom = zoom
        self._view.on_zoom_changed(zoom)
        self.notify(events.ZoomChanged(zoom))
        return zoom

    def zoom_by(self, direction):
        ''' Zooms in or out by a fixed factor and switches to free zoom. The
        view gets the scaled zoom as is, without fitting or budget checks. '''
        log.info('Zoom %s', direction)
        try:
            factor = _ZOOM_FACTORS[direction]
        except KeyError:
            log.debug('Unknown zoom direction %r', direction)
            return False
        self.state.zoom *= factor
        log.info('Zoom is now at %s', self.state.zoom)
        self._apply_mode(ZoomMode.FREE, recompute=False)
        self._view.on_zoom_changed(self.state.zoom)
        self.notify(events.ZoomChanged(self.state.zoom))
        return True

    def on_page_changed(self, page):
        self.state.current_page = page
        self.set_zoom()

    def on_rotation_changed(self, degrees):
        self.state.rotation = rotation.normalize(degrees)
        self.set_zoom()

    def on_viewport_changed(self, viewport):
        ''' Called when the view was resized. '''
        self.state.viewport = Size(*viewport)
        self.set_zoom()

    on_restore_dimensions = on_viewport_changed

    def set_footer(self, height, reclaim_height=False):
        ''' Reserves <height> pixels of the viewport for the footer, unless
        <reclaim_height> gives them back to the page. '''
        self.state.footer_height = height
        self.state.footer_reclaim_height = reclaim_height
        self.set_zoom()

    def on_reflow(self, font_size):
        document = self._document
        if document.is_reflowable():
            document.layout_document(document.convert_font_size(font_size))
        self.set_zoom()
        self.notify(events.InitScrollState(self.state.mode))
        return True

    def on_spread(self, direction):
        return self._gesture_mode(_SPREAD_MODES, direction)

    def on_pinch(self, direction):
        return self._gesture_mode(_PINCH_MODES, direction)

    def _gesture_mode(self, modes, direction):
        mode = modes.get(direction)
        if mode is None:
            log.debug('Ignoring gesture direction %r', direction)
            return False
        self.set_mode(mode)
        return True

    def enter_flipping_mode(self, mode):
        ''' Temporarily forces a page oriented mode. Only the first saved
        mode is kept if flipping mode is entered again. '''
        if self.state.saved_mode is None:
            self.state.saved_mode = self.state.mode
        mode = resolve_mode(mode, self.settings.default_mode)
        if mode is ZoomMode.FREE:
            mode = ZoomMode.PAGE
        self._apply_mode(mode)

    def exit_flipping_mode(self, mode=None):
        ''' Leaves flipping mode, switching to <mode>, or back to the saved
        mode if <mode> is None. '''
        if mode is None:
            mode = self.state.saved_mode
        self.state.saved_mode = None
        self._apply_mode(resolve_mode(mode, self.settings.default_mode))

    def on_toggle_free_zoom(self, pos):
        ''' Enters free zoom centered on the content block at screen
        position <pos>, or leaves it for page mode. '''
        state = self.state
        if state.mode is ZoomMode.FREE:
            self._apply_mode(ZoomMode.PAGE)
            return True
        pos = Point(*pos)
        state.saved_zoom = state.zoom
        center = regional.get_regional_zoom_center(
            self._document, self._view, state.current_page, pos,
            state.viewport, self.settings.margin_pixels())
        log.info('Zoom center %s %s %s', center.zoom, center.xpos, center.ypos)
        state.zoom = center.zoom
        self._apply_mode(ZoomMode.FREE)
        if self._last_zoom == cache_budget.NO_VIABLE_ZOOM:
            state.zoom = state.saved_zoom
            return True
        if center.xpos is None or center.ypos is None:
            xpos, ypos = regional.fallback_center(pos, state.saved_zoom,
                                                  state.zoom)
        else:
            xpos, ypos = center.xpos, center.ypos
        self._view.set_zoom_center(xpos, ypos)
        return True

    def set_zoom_factor(self, value):
        ''' Sets the column count (column mode) or zoom multiplier (pan
        mode). Column mode always pans vertically without horizontal
        overlap. '''
        state = self.state
        if state.mode is ZoomMode.COLUMN:
            minimum = constants.ZOOM_FACTOR_MIN_COLUMN
        else:
            minimum = constants.ZOOM_FACTOR_MIN_PAN
        state.pan_factor = tools.clamp(value, minimum,
                                       constants.ZOOM_FACTOR_MAX)
        fields = {'zoom_factor': state.pan_factor}
        if state.mode is ZoomMode.COLUMN:
            state.vertical_pan = True
            state.overlap_h = 0
            fields['vertical_pan'] = True
            fields['overlap_h'] = 0
        self.set_zoom()
        self.notify(events.PanSettingsChanged(fields))
        self.notify(events.RequestRedraw())

    def set_pan_overlap(self, name, value):
        if name not in constants.PAN_OVERLAP_SETTINGS:
            raise ValueError('No pan overlap setting %r.' % name)
        value = tools.clamp(value, constants.PAN_OVERLAP_MIN,
                            constants.PAN_OVERLAP_MAX)
        setattr(self.state, name, value)
        self.notify(events.PanSettingsChanged({name: value}))
        self.notify(events.RequestRedraw())

    def toggle_pan_flag(self, name):
        if name not in constants.PAN_FLAG_SETTINGS:
            raise ValueError('No pan direction setting %r.' % name)
        value = not getattr(self.state, name)
        setattr(self.state, name, value)
        self.notify(events.PanSettingsChanged({name: value}))
        return value

    def make_default(self, mode):
        ''' Makes <mode> the global default zoom mode. '''
        mode = resolve_mode(mode, self.settings.default_mode)
        prefs['zoom_mode'] = mode.value
        self.settings.default_mode = mode
        return mode

    @staticmethod
    def get_default_mode():
        return resolve_mode(prefs.get('zoom_mode'),
                            constants.DEFAULT_ZOOM_MODE)

    def activate(self, action):
        ''' Runs the zoom action <action>, see keybindings_map. '''
        info = keybindings_map.BINDING_INFO[action]
        if 'zoom' in info:
            return self.zoom_by(info['zoom'])
        self.set_mode(info['mode'])
        return True

    def activate_binding(self, binding):
        ''' Runs the zoom action bound to the accelerator <binding> by
        default. Returns False if no zoom action is bound to it. '''
        action = keybindings_map.action_for_binding(binding)
        if action is None:
            log.debug('No zoom action bound to %s', binding)
            return False
        return self.activate(action)

# vim: expandtab:sw=4:ts=4
