"""
********************************************************************************
* Copyright (c) 2025 the qidops authors
*
* This program and the accompanying materials are made available under the
* terms of the Eclipse Public License 2.0 which is available at
* http://www.eclipse.org/legal/epl-2.0.
*
* This Source Code may also be made available under the following Secondary
* Licenses when the conditions for such availability set forth in the Eclipse
* Public License, v. 2.0 are satisfied: GNU General Public License, version 2
* with the GNU Classpath Exception which is
* available at https://www.gnu.org/software/classpath/license.html.
*
* SPDX-License-Identifier: EPL-2.0 OR GPL-2.0 WITH Classpath-exception-2.0
********************************************************************************
"""
import copy

import numpy as np
import pytest

from qidops import (
    InvalidDimensionError,
    LineQid,
    LineQubit,
    NamedQid,
    NamedQubit,
    Qid,
    QubitAsQid,
    QubitAsQId,
    validate_dimension,
)


class Resonator(Qid):

    def __init__(self, label, dimension):
        self.label = label
        self._dimension = Qid.validate_dimension(dimension)

    def _comparison_key(self):
        return "resonator_" + self.label

    @property
    def dimension(self):
        return self._dimension


@pytest.mark.parametrize("dimension", [0, -1, -100, np.int64(0)])
def test_validate_dimension_rejects_non_positive(dimension):
    """Check that dimensions smaller than 1 are rejected independent of the instance."""
    with pytest.raises(InvalidDimensionError, match="Expected a positive integer"):
        validate_dimension(dimension)
    with pytest.raises(InvalidDimensionError):
        NamedQubit("a").validate_dimension(dimension)
    with pytest.raises(InvalidDimensionError):
        LineQid(0, 5).validate_dimension(dimension)


@pytest.mark.parametrize("dimension", [1, 2, 3, 17, np.int32(4)])
def test_validate_dimension_accepts_positive(dimension):
    assert validate_dimension(dimension) == dimension
    assert type(validate_dimension(dimension)) is int
    NamedQubit("a").validate_dimension(dimension)
    LineQid(0, 5).validate_dimension(dimension)


@pytest.mark.parametrize("dimension", [2.0, 2.5, "2", None, True])
def test_validate_dimension_rejects_non_integers(dimension):
    with pytest.raises(InvalidDimensionError):
        validate_dimension(dimension)


def test_invalid_dimension_error_is_value_error():
    with pytest.raises(ValueError):
        NamedQid("a", 0)


def test_equality_only_depends_on_comparison_key():
    """Check that qids with equal keys are equal regardless of other fields."""
    r_10 = Resonator("r0", 10)
    r_3 = Resonator("r0", 3)

    assert r_10 == r_3
    assert hash(r_10) == hash(r_3)
    assert not r_10 != r_3
    assert Resonator("r0", 3) != Resonator("r1", 3)
    assert len({r_10, r_3}) == 1


def test_comparison_with_other_types():
    assert NamedQubit("a") != "a"
    with pytest.raises(TypeError):
        NamedQubit("a") < "a"


def test_heterogeneous_ordering_follows_comparison_keys():
    qids = [NamedQubit("b"), LineQubit(3), Resonator("r", 4), NamedQubit("a"), LineQubit(-2)]

    sorted_qids = sorted(qids)

    assert [qid.comparison_key() for qid in sorted_qids] == sorted(
        qid.comparison_key() for qid in qids
    )
    for first, second in zip(sorted_qids, sorted_qids[1:]):
        assert first < second
        assert first <= second
        assert second > first
        assert second >= first


def test_qubit_as_qid():
    qb = NamedQubit("alphonse")

    qutrit = QubitAsQid(qb, 2)
    assert qutrit.dimension == 2
    assert qutrit.qubit is qb

    with pytest.raises(InvalidDimensionError):
        QubitAsQid(qb, 0)

    with pytest.raises(TypeError):
        QubitAsQid("alphonse", 2)


def test_qubit_as_qid_comparison_key():
    """Check that the key of the adapter depends on the wrapped qubit and the dimension."""
    a = NamedQubit("a")
    b = NamedQubit("b")

    assert QubitAsQid(a, 3) != QubitAsQid(b, 3)
    assert QubitAsQid(a, 3) != QubitAsQid(a, 4)
    assert QubitAsQid(a, 3) == QubitAsQid(NamedQubit("a"), 3)
    assert QubitAsQid(a, 3).comparison_key().startswith(a.comparison_key())
    assert QubitAsQid(a, 2) != a


def test_qubit_as_qid_with_dimension():
    qb = LineQubit(0)
    adapter = QubitAsQid(qb, 3)

    same = adapter.with_dimension(3)
    assert same == adapter
    assert same is not adapter
    assert same.dimension == 3

    other = adapter.with_dimension(5)
    assert isinstance(other, QubitAsQid)
    assert other.qubit is qb
    assert other.dimension == 5

    back = adapter.with_dimension(2)
    assert isinstance(back, QubitAsQid)
    assert back.qubit is qb

    with pytest.raises(InvalidDimensionError):
        adapter.with_dimension(0)


def test_generic_with_dimension_wraps_qid():
    res = Resonator("r", 4)
    assert res.with_dimension(4) == res
    assert res.with_dimension(4).dimension == 4

    wrapped = res.with_dimension(6)
    assert isinstance(wrapped, QubitAsQid)
    assert wrapped.qubit is res
    assert wrapped.dimension == 6


def test_deprecated_alias():
    with pytest.warns(DeprecationWarning):
        adapter = QubitAsQId(NamedQubit("a"), 3)
    assert adapter == QubitAsQid(NamedQubit("a"), 3)


def test_copy_gives_equal_independent_qids():
    qids = [NamedQubit("a"), NamedQid("b", 3), LineQubit(1), LineQid(2, 4), QubitAsQid(LineQubit(1), 3)]
    for qid in qids:
        for duplicate in [qid.copy(), copy.copy(qid), copy.deepcopy(qid)]:
            assert duplicate == qid
            assert duplicate.dimension == qid.dimension
            assert type(duplicate) is type(qid)


def test_named_qubits():
    qb = NamedQubit("q")
    assert qb.name == "q"
    assert qb.dimension == 2
    assert str(qb) == "q"
    assert repr(qb) == "NamedQubit('q')"
    assert NamedQubit("q") == NamedQid("q", 2)
    assert NamedQid("q", 3) != qb

    qutrit = qb.with_dimension(3)
    assert qutrit == NamedQid("q", 3)
    assert type(qutrit) is NamedQid

    with pytest.raises(TypeError):
        NamedQubit(1)


def test_named_qubit_natural_ordering():
    qubits = NamedQubit.range(12, prefix="q")
    assert sorted(reversed(qubits)) == qubits
    assert NamedQubit("q2") < NamedQubit("q10")


def test_line_qubits():
    q0, q1, q2 = LineQubit.range(3)
    assert (q0.x, q1.x, q2.x) == (0, 1, 2)
    assert q0 < q1 < q2
    assert LineQubit(-5) < LineQubit(-1) < LineQubit(0) < LineQubit(100)
    assert LineQubit(1) == LineQid(1, 2)
    assert LineQid(1, 3) != LineQubit(1)
    assert str(q1) == "q(1)"
    assert repr(LineQid(1, 3)) == "LineQid(1, dimension=3)"

    assert LineQubit(np.int64(4)).x == 4
    with pytest.raises(TypeError):
        LineQubit(1.5)


def test_line_qid_constructors():
    assert LineQid.range(1, 3, dimension=4) == [LineQid(1, 4), LineQid(2, 4)]
    assert [qid.dimension for qid in LineQid.for_qid_shape((2, 3, 5))] == [2, 3, 5]
    assert LineQid.for_qid_shape((2, 3), start=4, step=2) == [LineQid(4, 2), LineQid(6, 3)]

    with pytest.raises(InvalidDimensionError):
        LineQid.for_qid_shape((2, 0))

    assert LineQubit(3).with_dimension(3) == LineQid(3, 3)
    assert type(LineQubit(3).with_dimension(3)) is LineQid


@pytest.mark.parametrize("name_a, name_b", [
    ("q2", "q02"),
    ("q0", "q00"),
    ("a1b2", "a01b2"),
    ("7", "007"),
])
def test_leading_zeros_give_distinct_named_qubits(name_a, name_b):
    """Check that names differing only in leading zeros identify different qubits."""
    qb_a = NamedQubit(name_a)
    qb_b = NamedQubit(name_b)

    assert qb_a != qb_b
    assert qb_a.comparison_key() != qb_b.comparison_key()
    assert len({qb_a, qb_b}) == 2
    assert (qb_a < qb_b) != (qb_b < qb_a)


def test_keys_of_different_qid_kinds_differ():
    line_qb = LineQubit(0)
    named_qb = NamedQubit(line_qb.comparison_key()[: -len(" (d=2)")])

    assert named_qb != line_qb
    assert len({named_qb, line_qb}) == 2
    assert NamedQid("line 9223372036854775808", 2) != LineQid(0, 2)
    assert NamedQubit("x").comparison_key().startswith("named ")
    assert LineQubit(0).comparison_key().startswith("line ")
