''' Keeps zoom values within what the render cache is willing to hold.

A page rendered at a large zoom produces a bitmap the cache may refuse.
Instead of failing to render, the zoom is lowered in steps until the cache
accepts the estimated cost. '''

from pagezoom import constants
from pagezoom import log

#: (lower bound, step) pairs, checked in order: while the zoom is larger
#: than the lower bound, it is decreased by step.
DEFAULT_STEP_BANDS = (
    (100, 50),
    (10, 5),
    (1, 0.5),
    (0.1, 0.05),
)
DEFAULT_FLOOR_STEP = 0.005

#: Returned when no zoom at all fits into the cache. Never render at it.
NO_VIABLE_ZOOM = 0


class StepSchedule(object):
    ''' Maps a zoom magnitude to the amount it is lowered by. '''

    def __init__(self, bands=DEFAULT_STEP_BANDS, floor_step=DEFAULT_FLOOR_STEP):
        for lower, step in bands:
            if step <= 0:
                raise ValueError('Step for zoom > %s must be positive' % lower)
        if floor_step <= 0:
            raise ValueError('Floor step must be positive')
        self.bands = tuple(bands)
        self.floor_step = floor_step

    def step(self, zoom):
        for lower, step in self.bands:
            if zoom > lower:
                return step
        return self.floor_step


class CacheBudget(object):

    def __init__(self, will_accept, schedule=None,
                 threshold=constants.CACHE_CHECK_THRESHOLD,
                 overhead=constants.CACHE_COST_OVERHEAD):
        ''' @param will_accept: Admission predicate of the render cache,
        called with an estimated cost. Only its answer is used.
        @param schedule: StepSchedule, defaults to the built-in one.
        @param threshold: Zoom values up to this are never checked.
        @param overhead: Added to the viewport pixel count per bitmap. '''
        self._will_accept = will_accept
        self.schedule = schedule if schedule is not None else StepSchedule()
        self.threshold = threshold
        self.overhead = overhead

    def cost(self, zoom, viewport):
        ''' Estimated cache cost of rendering at <zoom>. '''
        return zoom * (viewport.w * viewport.h + self.overhead)

    def limit(self, zoom, viewport):
        ''' Returns <zoom>, or a smaller zoom the cache accepts, or
        NO_VIABLE_ZOOM if even the smallest step is refused. '''
        if zoom is None or zoom <= self.threshold:
            return zoom
        while not self._will_accept(self.cost(zoom, viewport)):
            log.debug('Zoom %s too large for render cache, adjusting', zoom)
            zoom -= self.schedule.step(zoom)
            if zoom < 0:
                return NO_VIABLE_ZOOM
        return zoom

# vim: expandtab:sw=4:ts=4
