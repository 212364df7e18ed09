import numpy as np

from orbitsweep.body import TwoBodySystem
from orbitsweep.sim_config import SweepConfig
from orbitsweep.verlet_scheme import LeapfrogIntegrator
from orbitsweep.diagnostics import Diagnostics
from orbitsweep.orbit_constants import V_CIRC_ORBIT


def _run_with_invariants(v_tan, dt, n_steps, sample_every=50):
    cfg = SweepConfig(dt=dt)
    system = TwoBodySystem.from_config(cfg, v_tan)
    integ = LeapfrogIntegrator(system, cfg.dt)
    diag = Diagnostics(system)
    E0 = diag.energy()
    L0 = diag.angular_momentum()
    integ.prime()

    e_drift, l_drift = 0.0, 0.0
    i = 0
    while i < n_steps:
        integ.step()
        if i % sample_every == 0:
            e_drift = max(e_drift, Diagnostics.relative_energy_drift(E0, diag.energy()))
            l_drift = max(l_drift, Diagnostics.relative_angular_momentum_drift(L0, diag.angular_momentum()))
        i += 1
    return e_drift, l_drift, integ


def test_circular_orbit_conserves_energy_and_angular_momentum():
    # roughly one full orbit at dt = 1 s
    e_drift, l_drift, integ = _run_with_invariants(V_CIRC_ORBIT, 1.0, 5200)

    assert integ.step_count == 5200
    assert e_drift < 1e-5
    assert l_drift < 1e-9


def test_eccentric_orbit_energy_stays_bounded():
    e_drift, l_drift, _ = _run_with_invariants(0.9 * V_CIRC_ORBIT, 1.0, 8000)

    assert e_drift < 1e-4
    assert l_drift < 1e-9


def test_linear_momentum_is_conserved():
    cfg = SweepConfig(dt=1.0)
    system = TwoBodySystem.from_config(cfg, V_CIRC_ORBIT)
    diag = Diagnostics(system)
    P0 = diag.linear_momentum()
    integ = LeapfrogIntegrator(system, cfg.dt)
    integ.prime()
    integ.run(500)

    np.testing.assert_allclose(diag.linear_momentum(), P0, rtol=1e-9, atol=1e-6 * np.linalg.norm(P0))


def test_unprimed_step_primes_itself_and_matches_primed_run(capsys):
    cfg = SweepConfig(dt=1.0)
    primed = TwoBodySystem.from_config(cfg, V_CIRC_ORBIT)
    unprimed = TwoBodySystem.from_config(cfg, V_CIRC_ORBIT)

    a = LeapfrogIntegrator(primed, cfg.dt)
    a.prime()
    b = LeapfrogIntegrator(unprimed, cfg.dt)

    a.run(10)
    b.run(10)

    assert b.primed
    assert capsys.readouterr().out.count("[warning]") == 1
    np.testing.assert_array_equal(primed.satellite.position, unprimed.satellite.position)
    np.testing.assert_array_equal(primed.satellite.velocity, unprimed.satellite.velocity)


def test_single_step_matches_kick_drift_kick_by_hand():
    cfg = SweepConfig(dt=2.0)
    system = TwoBodySystem.from_config(cfg, V_CIRC_ORBIT)
    integ = LeapfrogIntegrator(system, cfg.dt)
    integ.prime()

    sat = system.satellite
    x0 = sat.position.copy()
    v0 = sat.velocity.copy()
    a0 = sat.acceleration.copy()

    integ.step()

    v_half = v0 + 0.5 * a0 * cfg.dt
    x1 = x0 + v_half * cfg.dt
    np.testing.assert_allclose(sat.position, x1, rtol=1e-12)
    np.testing.assert_allclose(sat.velocity, v_half + 0.5 * sat.acceleration * cfg.dt, rtol=1e-12)
