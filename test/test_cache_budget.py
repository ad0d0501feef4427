# -*- coding: utf-8 -*-

import unittest

from pagezoom import cache_budget
from pagezoom.cache_budget import CacheBudget, StepSchedule
from pagezoom.geometry import Size

from .fakes import accept_all, accept_below

VIEWPORT = Size(10, 10)
#: cost of one zoom unit for VIEWPORT: 10 * 10 + 64
UNIT_COST = 164

def reject_all(cost):
    return False

class StepScheduleTest(unittest.TestCase):

    def test_default_bands(self):
        schedule = StepSchedule()
        self.assertEqual(schedule.step(150), 50)
        self.assertEqual(schedule.step(100), 5)
        self.assertEqual(schedule.step(50), 5)
        self.assertEqual(schedule.step(10), 0.5)
        self.assertEqual(schedule.step(5), 0.5)
        self.assertEqual(schedule.step(0.5), 0.05)
        self.assertEqual(schedule.step(0.05), 0.005)
        self.assertEqual(schedule.step(-1), 0.005)

    def test_steps_must_be_positive(self):
        self.assertRaises(ValueError, StepSchedule, ((10, 0),))
        self.assertRaises(ValueError, StepSchedule, (), 0)

class CacheBudgetTest(unittest.TestCase):

    def test_cost(self):
        budget = CacheBudget(accept_all)
        self.assertEqual(budget.cost(2, VIEWPORT), 2 * UNIT_COST)

    def test_small_zoom_is_not_checked(self):
        budget = CacheBudget(reject_all)
        self.assertEqual(budget.limit(10, VIEWPORT), 10)
        self.assertEqual(budget.limit(0.5, VIEWPORT), 0.5)

    def test_accepted_zoom_is_unchanged(self):
        budget = CacheBudget(accept_all)
        self.assertEqual(budget.limit(50, VIEWPORT), 50)

    def test_degrades_until_accepted(self):
        budget = CacheBudget(accept_below(UNIT_COST * 31))
        self.assertEqual(budget.limit(50, VIEWPORT), 30)
        self.assertEqual(budget.limit(250, VIEWPORT), 30)

    def test_degrades_strictly_and_terminates(self):
        costs = []
        def recording_reject(cost):
            costs.append(cost)
            return False
        budget = CacheBudget(recording_reject)
        self.assertEqual(budget.limit(20, VIEWPORT),
                         cache_budget.NO_VIABLE_ZOOM)
        self.assertTrue(len(costs) > 1)
        for before, after in zip(costs, costs[1:]):
            self.assertLess(after, before)

    def test_each_zoom_is_checked_once(self):
        costs = []
        def recording_accept(cost):
            costs.append(cost)
            return cost < UNIT_COST * 12
        budget = CacheBudget(recording_accept)
        self.assertEqual(budget.limit(50, VIEWPORT), 10)
        self.assertEqual(costs, [UNIT_COST * z for z in (50, 45, 40, 35,
                                                          30, 25, 20, 15,
                                                          10)])
        del costs[:]
        CacheBudget(recording_accept).limit(11, VIEWPORT)
        self.assertEqual(costs, [UNIT_COST * 11])

    def test_result_never_exceeds_start(self):
        for limit in (UNIT_COST * 3, UNIT_COST * 12, UNIT_COST * 500):
            budget = CacheBudget(accept_below(limit))
            for start in (11, 42, 101, 333.3):
                result = budget.limit(start, VIEWPORT)
                self.assertLessEqual(result, start)
                self.assertGreaterEqual(result, 0)

    def test_custom_schedule(self):
        budget = CacheBudget(accept_below(UNIT_COST * 16),
                             StepSchedule(((10, 3),), floor_step=1))
        self.assertEqual(budget.limit(20, VIEWPORT), 14)

    def test_custom_threshold(self):
        budget = CacheBudget(reject_all, threshold=100)
        self.assertEqual(budget.limit(50, VIEWPORT), 50)

# vim: expandtab:sw=4:ts=4
