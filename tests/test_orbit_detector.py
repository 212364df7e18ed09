import math

import numpy as np

from orbitsweep.orbit_detector import (
    OrbitPeriodDetector,
    OrbitTracker,
    swept_angle,
    signed_swept_angle,
    STATUS_COMPLETED,
    STATUS_DEGENERATE,
    STATUS_RUNNING,
)


def _unit(deg):
    rad = math.radians(deg)
    return np.array([math.cos(rad), math.sin(rad), 0.0])


def _feed(detector, angles_deg):
    completed_at = []
    for k in range(1, len(angles_deg)):
        if detector.observe(_unit(angles_deg[k - 1]), _unit(angles_deg[k])):
            completed_at.append(k)
    return completed_at


def test_swept_angle_is_unsigned_magnitude():
    assert math.isclose(swept_angle(_unit(0), _unit(50)), math.radians(50), rel_tol=1e-12)
    assert math.isclose(swept_angle(_unit(50), _unit(0)), math.radians(50), rel_tol=1e-12)
    assert math.isclose(swept_angle(np.array([2.0, 0.0, 0.0]), np.array([0.0, 5.0, 0.0])), math.pi / 2)


def test_signed_swept_angle_follows_normal():
    z = np.array([0.0, 0.0, 1.0])
    assert math.isclose(signed_swept_angle(_unit(0), _unit(50), z), math.radians(50), rel_tol=1e-12)
    assert math.isclose(signed_swept_angle(_unit(50), _unit(0), z), -math.radians(50), rel_tol=1e-12)


def test_orbit_recorded_when_angle_first_passes_full_turn_and_remainder_carried():
    det = OrbitPeriodDetector(3, 1.0)
    # 50 degree steps: 400 deg after step 8, then 750 deg after step 15
    completed_at = _feed(det, [50 * k for k in range(17)])

    assert completed_at == [8, 15]
    t = det.tracker
    np.testing.assert_array_equal(t.completion_times[:2], [8.0, 15.0])
    assert math.isnan(t.completion_times[2])
    assert t.orbits_completed == 2
    assert t.status == STATUS_RUNNING
    assert math.isclose(t.accumulated_angle, math.radians(80), rel_tol=1e-9)


def test_exact_quarter_turns_record_orbit_on_the_closing_step():
    # arccos(0) is pi/2 exactly in float64 and four of them sum to exactly 2 pi
    axes = [
        np.array([1.0, 0.0, 0.0]),
        np.array([0.0, 1.0, 0.0]),
        np.array([-1.0, 0.0, 0.0]),
        np.array([0.0, -1.0, 0.0]),
    ]
    det = OrbitPeriodDetector(2, 1.0)
    completed_at = []
    for k in range(1, 9):
        if det.observe(axes[(k - 1) % 4], axes[k % 4]):
            completed_at.append(k)
        if k == 4:
            assert det.tracker.accumulated_angle == 0.0
        if k == 5:
            assert det.tracker.accumulated_angle == math.pi / 2

    assert completed_at == [4, 8]
    np.testing.assert_array_equal(det.tracker.completion_times, [4.0, 8.0])
    assert det.tracker.status == STATUS_COMPLETED


class _FixedStepDetector(OrbitPeriodDetector):
    def __init__(self, target_orbits, dt, step):
        super().__init__(target_orbits, dt)
        self.step = step

    def angle_step(self, old_disp, new_disp):
        return self.step


def test_eighth_turn_steps_close_the_orbit_on_step_eight():
    det = _FixedStepDetector(2, 1.0, math.pi / 4)
    completed_at = [k for k in range(1, 17) if det.observe(None, None)]

    assert completed_at == [8, 16]
    assert det.tracker.accumulated_angle == 0.0


def test_rounded_full_turn_is_compared_without_tolerance():
    # twelve arccos steps of 30 degrees may sum to a hair under 2 pi; the
    # comparison is a plain >= so the orbit then closes one step later
    k = 12
    disps = [np.array([math.cos(2 * math.pi * j / k), math.sin(2 * math.pi * j / k), 0.0])
             for j in range(2 * k + 1)]
    steps = [swept_angle(disps[j - 1], disps[j]) for j in range(1, len(disps))]

    total = 0.0
    expected = None
    for j, s in enumerate(steps, start=1):
        total += s
        if total >= 2 * math.pi:
            expected = j
            break

    det = OrbitPeriodDetector(2, 1.0)
    completed_at = [j for j in range(1, len(disps)) if det.observe(disps[j - 1], disps[j])]

    assert expected in (k, k + 1)
    assert completed_at[0] == expected
    assert det.tracker.completion_times[0] == float(expected)


def test_detector_finishes_at_target_and_ignores_later_input():
    det = OrbitPeriodDetector(1, 0.5)
    completed_at = _feed(det, [52 * k for k in range(8)])

    assert completed_at == [7]
    assert det.finished
    assert det.tracker.status == STATUS_COMPLETED
    assert det.tracker.completion_times[0] == 3.5

    elapsed = det.tracker.elapsed_time
    assert det.observe(_unit(0), _unit(90)) is False
    assert det.tracker.elapsed_time == elapsed


def test_nan_angle_marks_degenerate_and_fills_remaining_slots():
    det = OrbitPeriodDetector(5, 1.0)
    _feed(det, [50 * k for k in range(16)])
    assert det.tracker.orbits_completed == 2

    det.observe(_unit(0), np.zeros(3))

    t = det.tracker
    assert t.status == STATUS_DEGENERATE
    assert t.degenerate
    np.testing.assert_array_equal(t.completion_times[:2], [8.0, 15.0])
    assert np.all(np.isnan(t.completion_times[2:]))

    steps_at_degeneracy = t.elapsed_time
    det.observe(_unit(0), _unit(90))
    assert t.elapsed_time == steps_at_degeneracy
    assert t.orbits_completed == 2


def test_unsigned_measure_counts_oscillation_as_progress():
    # back and forth between 0 and 100 degrees: no net progress around the primary
    swings = [0, 100, 0, 100, 0]

    unsigned = OrbitPeriodDetector(1, 1.0)
    assert _feed(unsigned, swings) == [4]

    signed = OrbitPeriodDetector(1, 1.0, angle_measure="signed", normal=[0.0, 0.0, 1.0])
    assert _feed(signed, swings) == []
    assert abs(signed.tracker.accumulated_angle) < 1e-12


def test_signed_measure_against_reversed_normal_never_completes():
    det = OrbitPeriodDetector(1, 1.0, angle_measure="signed", normal=[0.0, 0.0, -1.0])
    assert _feed(det, [50 * k for k in range(20)]) == []
    assert det.tracker.accumulated_angle < 0.0


def test_signed_measure_with_zero_normal_falls_back_to_z(capsys):
    det = OrbitPeriodDetector(1, 1.0, angle_measure="signed", normal=[0.0, 0.0, 0.0])
    np.testing.assert_array_equal(det.normal, [0.0, 0.0, 1.0])
    assert "[warning]" in capsys.readouterr().out


def test_zero_normal_fallback_is_silent_when_not_verbose(capsys):
    det = OrbitPeriodDetector(1, 1.0, angle_measure="signed", normal=None, verbose=False)
    np.testing.assert_array_equal(det.normal, [0.0, 0.0, 1.0])
    assert capsys.readouterr().out == ""


def test_signed_measure_degenerates_on_zero_displacement_step():
    assert math.isnan(signed_swept_angle(_unit(0), np.zeros(3), np.array([0.0, 0.0, 1.0])))
    assert math.isnan(signed_swept_angle(np.zeros(3), _unit(10), np.array([0.0, 0.0, 1.0])))

    det = OrbitPeriodDetector(3, 1.0, angle_measure="signed", normal=[0.0, 0.0, 1.0])
    _feed(det, [50 * k for k in range(10)])
    assert det.tracker.orbits_completed == 1

    det.observe(_unit(0), np.zeros(3))

    t = det.tracker
    assert t.status == STATUS_DEGENERATE
    assert t.elapsed_time == 10.0
    assert t.completion_times[0] == 8.0
    assert np.all(np.isnan(t.completion_times[1:]))


def test_tracker_starts_with_nan_slots():
    t = OrbitTracker(4)
    assert t.completion_times.shape == (4,)
    assert np.all(np.isnan(t.completion_times))
    assert not t.finished
