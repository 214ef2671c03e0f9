"""
Tests for prover/verifier parameters and the development setup.

Covers:
- generate(): lengths, the missing alpha^(N+1) slot, determinism, seeds
- structure of g / h / t checked through pairings (alpha itself is unknown)
- ProverParam / VerifierParam validation
- check_compatible()
"""

import pytest

from vcommit.errors import ParameterMismatch, CapacityExceeded
from vcommit.field import G1, G2, ec_pairing
from vcommit.params import ProverParam, VerifierParam, check_compatible
from vcommit.srs import generate


# ─────────────────────────────────────────────────────────────────────
# generate
# ─────────────────────────────────────────────────────────────────────

class TestGenerate:
    """generate 테스트."""

    def test_capacity(self, prover_param, verifier_param):
        assert prover_param.capacity == 4
        assert verifier_param.capacity == 4

    def test_g_length(self, prover_param):
        """len(g) == 2N."""
        assert len(prover_param.g) == 8

    def test_h_length(self, verifier_param):
        """len(h) == N."""
        assert len(verifier_param.h) == 4

    def test_g_gap_is_infinity(self, prover_param):
        """g[N]은 무한원점 (α^(N+1)·G1은 공개되지 않는다)."""
        assert prover_param.g[4] is None

    def test_other_g_entries_not_infinity(self, prover_param):
        for i, pt in enumerate(prover_param.g):
            if i != 4:
                assert pt is not None, f"g[{i}] is at infinity"

    def test_g_entries_distinct(self, prover_param):
        points = [pt for pt in prover_param.g if pt is not None]
        assert len(set(map(str, points))) == len(points)

    def test_g0_and_h0_share_alpha(self, prover_param, verifier_param):
        """e(g[0], G2) == e(G1, h[0]) == e(G1,G2)^α."""
        assert ec_pairing(G2, prover_param.g[0]) == ec_pairing(verifier_param.h[0], G1)

    def test_t_is_alpha_n_plus_one(self, prover_param, verifier_param):
        """e(g[N-1], h[0]) = e(G1,G2)^(α^N · α) == t."""
        assert ec_pairing(verifier_param.h[0], prover_param.g[3]) == verifier_param.t

    def test_deterministic_with_same_seed(self, prover_param, verifier_param):
        pp, vp = generate(4, seed=42)
        assert pp == prover_param
        assert vp.h == verifier_param.h

    def test_different_seeds_produce_different_params(self):
        pp1, _ = generate(1, seed=1)
        pp2, _ = generate(1, seed=2)
        assert pp1.g[0] != pp2.g[0]

    def test_capacity_one(self):
        pp, vp = generate(1, seed=7)
        assert len(pp.g) == 2
        assert pp.g[1] is None
        assert len(vp.h) == 1

    def test_generate_without_seed(self):
        pp, vp = generate(1)
        assert pp.g[0] is not None
        assert vp.capacity == 1

    @pytest.mark.parametrize("capacity", [0, -3])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(CapacityExceeded):
            generate(capacity, seed=1)


# ─────────────────────────────────────────────────────────────────────
# 파라미터 레코드
# ─────────────────────────────────────────────────────────────────────

class TestParamRecords:
    """ProverParam / VerifierParam 검증 테스트."""

    def test_prover_param_accepts_2n_minus_1(self):
        pp = ProverParam(2, [G1, G1, G1])
        assert pp.capacity == 2
        assert len(pp.g) == 3

    def test_prover_param_short_g(self):
        with pytest.raises(ParameterMismatch):
            ProverParam(3, [G1] * 4)

    def test_prover_param_zero_capacity(self):
        with pytest.raises(ParameterMismatch):
            ProverParam(0, [])

    def test_prover_param_is_immutable_sequence(self):
        g = [G1, G1, G1]
        pp = ProverParam(2, g)
        g.append(G1)
        assert len(pp.g) == 3
        assert isinstance(pp.g, tuple)

    def test_verifier_param_short_h(self, verifier_param):
        with pytest.raises(ParameterMismatch):
            VerifierParam(3, [G2, G2], verifier_param.t)

    def test_verifier_param_missing_t(self):
        with pytest.raises(ParameterMismatch):
            VerifierParam(1, [G2], None)

    def test_repr_does_not_dump_points(self, prover_param, verifier_param):
        assert repr(prover_param) == "ProverParam(capacity=4, len(g)=8)"
        assert repr(verifier_param) == "VerifierParam(capacity=4, len(h)=4)"


class TestCheckCompatible:
    """check_compatible 테스트."""

    def test_same_capacity(self, prover_param, verifier_param):
        check_compatible(prover_param, verifier_param)

    def test_capacity_mismatch(self, prover_param, verifier_param):
        other = ProverParam(2, prover_param.g[:4])
        with pytest.raises(ParameterMismatch):
            check_compatible(other, verifier_param)
