"""
Tests for storage / wire serializers.
"""

import json
import pytest
from py_ecc import bn128

from vcommit.errors import SerializationError
from vcommit.field import FR, G1, G2, FIELD_MODULUS, ec_mul
from vcommit.commitment import commit, create_witness, verify
from vc_serializers import (
    serialize_fr, deserialize_fr,
    serialize_fr_list, deserialize_fr_list,
    serialize_g1, deserialize_g1,
    serialize_g2, deserialize_g2,
    serialize_gt, deserialize_gt,
    serialize_prover_param, deserialize_prover_param,
    serialize_verifier_param, deserialize_verifier_param,
    point_to_hex, point_from_hex,
    g1_short,
)


class TestScalars:
    def test_fr(self):
        assert serialize_fr(FR(12345)) == "12345"
        assert deserialize_fr("12345") == FR(12345)

    def test_fr_from_json_int(self):
        assert deserialize_fr(7) == FR(7)

    def test_fr_rejects_garbage(self):
        with pytest.raises(SerializationError):
            deserialize_fr("abc")

    def test_fr_rejects_bool(self):
        with pytest.raises(SerializationError):
            deserialize_fr(True)

    @pytest.mark.parametrize("value", [7.9, 7.0, "7.9", "0x7", " 7", "", None])
    def test_fr_rejects_non_integer(self, value):
        with pytest.raises(SerializationError):
            deserialize_fr(value)

    def test_fr_negative_string(self):
        assert deserialize_fr("-1") == FR(-1)

    def test_fr_list(self):
        vals = [FR(1), FR(2), FR(-1)]
        assert deserialize_fr_list(serialize_fr_list(vals)) == vals

    def test_fr_list_requires_list(self):
        with pytest.raises(SerializationError):
            deserialize_fr_list("1,2,3")


class TestPoints:
    def test_g1(self):
        P = ec_mul(G1, 31337)
        assert deserialize_g1(serialize_g1(P)) == P

    def test_g1_infinity(self):
        assert serialize_g1(None) is None
        assert deserialize_g1(None) is None

    def test_g2(self):
        Q = ec_mul(G2, 5)
        assert deserialize_g2(serialize_g2(Q)) == Q

    def test_g1_rejects_off_curve(self):
        with pytest.raises(SerializationError):
            deserialize_g1(["1", "3"])

    @pytest.mark.parametrize("data", [["1"], "1,2", [1.0, 2.0], ["1", "2", "3"]])
    def test_g1_rejects_malformed(self, data):
        with pytest.raises(SerializationError):
            deserialize_g1(data)

    def test_g1_rejects_out_of_range_coordinate(self):
        with pytest.raises(SerializationError):
            deserialize_g1([str(1 + FIELD_MODULUS), "2"])

    def test_g2_rejects_off_curve(self):
        with pytest.raises(SerializationError):
            deserialize_g2([["1", "0"], ["1", "0"]])

    def test_g2_rejects_malformed(self):
        with pytest.raises(SerializationError):
            deserialize_g2([["1", "0"]])

    def test_gt(self):
        val = bn128.FQ12([i + 1 for i in range(12)])
        assert deserialize_gt(serialize_gt(val)) == val

    def test_gt_wrong_length(self):
        with pytest.raises(SerializationError):
            deserialize_gt(["1"] * 11)

    def test_hex(self):
        P = ec_mul(G1, 77)
        assert point_from_hex(point_to_hex(P)) == P
        assert len(point_to_hex(P)) == 128

    def test_hex_rejects_non_hex(self):
        with pytest.raises(SerializationError):
            point_from_hex("zz" * 64)

    def test_hex_rejects_non_str(self):
        with pytest.raises(SerializationError):
            point_from_hex(None)

    def test_g1_short(self):
        assert g1_short(None) == "O (infinity)"
        assert g1_short(G1).startswith("(1")


class TestParams:
    """파라미터 직렬화는 JSON을 거쳐도 검증이 그대로 통과해야 한다."""

    def test_prover_param_round_trip(self, prover_param):
        data = json.loads(json.dumps(serialize_prover_param(prover_param)))
        restored = deserialize_prover_param(data)
        assert restored == prover_param
        assert restored.g[4] is None

    def test_verifier_param_round_trip(self, verifier_param):
        data = json.loads(json.dumps(serialize_verifier_param(verifier_param)))
        assert deserialize_verifier_param(data) == verifier_param

    def test_restored_params_verify(self, prover_param, verifier_param, example_inputs):
        pp = deserialize_prover_param(serialize_prover_param(prover_param))
        vp = deserialize_verifier_param(serialize_verifier_param(verifier_param))
        C = commit(pp, example_inputs)
        W = create_witness(pp, example_inputs, 2)
        assert verify(C, vp, example_inputs[2], 2, W) is True
